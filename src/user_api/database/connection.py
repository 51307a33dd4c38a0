"""
Database connection and pool management
"""

import asyncpg
import logging
from typing import Optional
from fastapi import Request

from user_api.config.settings import DatabaseSettings

logger = logging.getLogger(__name__)


async def init_database(settings: DatabaseSettings) -> asyncpg.Pool:
    """Open the connection pool and verify the database answers"""
    db_pool = await asyncpg.create_pool(
        host=settings.host,
        port=settings.port,
        user=settings.user,
        password=settings.password,
        database=settings.database,
        min_size=2,
        max_size=10,
        command_timeout=60,
    )

    # Test connection
    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except Exception:
        await db_pool.close()
        raise

    logger.info("Database initialized successfully")
    return db_pool


async def close_database(db_pool: Optional[asyncpg.Pool]) -> None:
    """Close database connection pool"""
    if db_pool:
        await db_pool.close()
    logger.info("Database connections closed")


def get_db_pool(request: Request) -> asyncpg.Pool:
    """Get the pool owned by the running application"""
    return request.app.state.db_pool
