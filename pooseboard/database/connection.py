import asyncpg
import asyncio
from ..config import DatabaseConfig, database
from ..logger import get_logger

logger = get_logger(__name__)

class DatabaseError(Exception):
    """Raised by the store layer when a statement cannot be run"""

class DatabaseConnection:
    def __init__(self, config: DatabaseConfig = database):
        self.config = config
        self.pool = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Create the connection pool from DATABASE_URL"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            if not self.config.URL:
                raise DatabaseError("DATABASE_URL is not set")

            try:
                self.pool = await asyncpg.create_pool(
                    dsn=self.config.URL,
                    min_size=self.config.POOL_MIN_SIZE,
                    max_size=self.config.POOL_MAX_SIZE,
                    command_timeout=self.config.COMMAND_TIMEOUT,
                )
                self._initialized = True
                logger.info("Database connection initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize database connection: {e}")
                await self.close()
                raise DatabaseError("Failed to initialize database connection") from e

    async def close(self):
        """Close database connections"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False

    def acquire(self):
        """Acquire a pooled connection, for use as ``async with``"""
        if self.pool is None:
            raise DatabaseError("Database connection not initialized")
        return self.pool.acquire()
