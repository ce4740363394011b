from typing import List
from ..config import DatabaseConfig, database
from ..models.score import Score
from .connection import DatabaseConnection
from .key_manager import ApiKeyManager
from .score_manager import ScoreManager
from ..logger import get_logger

logger = get_logger(__name__)

class DatabaseManager:
    """Entry point to the store, built once per process and injected into routes"""

    def __init__(self, config: DatabaseConfig = database):
        self.db_connection = DatabaseConnection(config)
        self.score_manager = ScoreManager(self.db_connection)
        self.key_manager = ApiKeyManager(self.db_connection)

    async def initialize(self):
        """Open the connection pool"""
        await self.db_connection.initialize()
        logger.info("Database manager initialized successfully")

    async def close(self):
        """Close the connection pool"""
        await self.db_connection.close()

    async def get_top_scores(self, count: int) -> List[Score]:
        """Get the top `count` scores, highest first"""
        return await self.score_manager.get_top_scores(count)

    async def insert_score(self, score: Score):
        """Store a submitted score"""
        await self.score_manager.insert_score(score)

    async def is_valid_api_key(self, key: str) -> bool:
        """Check whether an API key is provisioned"""
        return await self.key_manager.is_valid(key)
