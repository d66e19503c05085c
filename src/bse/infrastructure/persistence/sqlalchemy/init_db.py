"""Database initialization utilities."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import bse.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from bse.infrastructure.persistence.sqlalchemy.engine import create_engine
from bse.infrastructure.persistence.sqlalchemy.models.base import Base
from bse_config.settings import get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    When no engine is given, one is built from settings and disposed after.
    """
    owns_engine = engine is None
    if engine is None:
        engine = create_engine(get_settings().database_url)

    logger.info("Ensuring all database tables exist...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        if owns_engine:
            await engine.dispose()
    logger.info("Database schema is up to date")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owns_engine = engine is None
    if engine is None:
        engine = create_engine(get_settings().database_url)

    logger.warning("Dropping all database tables...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        if owns_engine:
            await engine.dispose()
    logger.info("Database tables dropped successfully")
