"""GlowAI — skin profile capture and tiered skincare recommendations."""

__version__ = "0.1.0"
