"""
Process-wide async engine.

The engine owns the connection pool; callers never acquire or release
connections themselves. Statements run in AUTOCOMMIT mode, so each one is
committed on its own.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from lightbnb.config import Settings, get_settings
from lightbnb.utils.logging import get_logger

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create a new AsyncEngine configured from ``settings``."""
    return create_async_engine(
        settings.get_database_connection_string(),
        pool_size=settings.db_pool_size,
        echo=settings.db_echo,
        isolation_level="AUTOCOMMIT",
        hide_parameters=True,
    )


def get_engine() -> AsyncEngine:
    """
    Return the shared engine, creating it on first use.
    """
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine_from_settings(settings)
        logger.info(
            "database.engine_created",
            pool_size=settings.db_pool_size,
            environment=settings.ENVIRONMENT,
        )
    return _engine


async def dispose_engine() -> None:
    """Close every pooled connection and forget the shared engine."""
    global _engine
    if _engine is None:
        return
    engine, _engine = _engine, None
    await engine.dispose()
    logger.info("database.engine_disposed")
