import asyncpg
import logging
from pathlib import Path

from ..config import AuthSettings

logger = logging.getLogger(__name__)

SCHEMA_FILE = Path(__file__).parent / "schema.sql"


async def create_pool(settings: AuthSettings) -> asyncpg.Pool:
    """
    Create the asyncpg connection pool
    """
    pool = await asyncpg.create_pool(
        dsn=settings.database_url,
        min_size=1,
        max_size=20,
        command_timeout=settings.db_command_timeout
    )
    logger.info("Database pool created")
    return pool


class DatabaseManager:
    """Database management utilities"""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def create_tables(self):
        """Create the users table if it does not exist"""
        schema_sql = SCHEMA_FILE.read_text()
        async with self.pool.acquire() as conn:
            await conn.execute(schema_sql)
        logger.info("Database tables created successfully")

    async def check_connection(self) -> bool:
        """Check database connection"""
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def close(self):
        await self.pool.close()
        logger.info("Database pool closed")


async def init_database(settings: AuthSettings) -> DatabaseManager:
    """Create the pool and make sure the schema exists"""
    try:
        pool = await create_pool(settings)
        manager = DatabaseManager(pool)
        await manager.create_tables()
        logger.info("Database initialized successfully")
        return manager
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise
