#!/usr/bin/env python3
"""
Database initialization script for GlowAI
Creates all database tables and loads the sample catalog
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

from glowai.config import get_settings
from glowai.database import SessionLocal, engine, init_db
from glowai.repository import CatalogRepository
from glowai.seed import sample_catalog

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Initialize the database"""
    try:
        logger.info("Starting database initialization...")
        logger.info(f"Database URL: {get_settings().database_url}")

        await init_db()

        async with SessionLocal() as session:
            repo = CatalogRepository(session)
            if await repo.list_products():
                logger.info("Catalog already loaded, skipping seed")
            else:
                await repo.add_products(sample_catalog())
        logger.info("✅ Database initialized successfully!")

    except Exception as e:
        logger.error(f"❌ Error initializing database: {str(e)}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
