"""
Error taxonomy shared by the engine and its collaborators.

Pure engine code raises ValidationError only for programmer errors (an
incomplete profile reaching the ranker). Collaborator failures are
recoverable and surface to the caller as typed exceptions.
"""


class GlowAIError(Exception):
    """Base class for every error raised by GlowAI."""


class ValidationError(GlowAIError):
    """A profile is missing fields required by its capture source."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class AnalysisFailed(GlowAIError):
    """The image pipeline could not produce an estimate."""


class Unauthenticated(GlowAIError):
    """A tier-gated feature was requested without a session."""
