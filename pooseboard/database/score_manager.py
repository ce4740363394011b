from typing import List
import pydantic
from ..models.score import Score
from ..logger import get_logger
from .connection import DatabaseError

logger = get_logger(__name__)

GET_SCORES_STMT = 'SELECT name, score FROM scores ORDER BY score DESC LIMIT $1'
INSERT_SCORE_STMT = 'INSERT INTO scores (name, score) VALUES ($1, $2)'

class ScoreManager:
    def __init__(self, db_connection):
        self.db = db_connection

    async def get_top_scores(self, count: int) -> List[Score]:
        """Get the `count` highest scores, best first"""
        try:
            async with self.db.acquire() as conn:
                rows = await conn.fetch(GET_SCORES_STMT, count)
        except Exception as e:
            logger.error(f"Database error fetching top {count} scores: {e}")
            raise DatabaseError("Failed to fetch scores") from e

        scores = []
        for row in rows:
            try:
                scores.append(Score(name=row['name'], score=row['score']))
            except (KeyError, pydantic.ValidationError) as e:
                logger.error(f"Skipping unreadable score row: {e}")
        return scores

    async def insert_score(self, score: Score):
        """Store a single score"""
        try:
            async with self.db.acquire() as conn:
                status = await conn.execute(INSERT_SCORE_STMT, score.name, score.score)
        except Exception as e:
            logger.error(f"Database error inserting score for {score.name!r}: {e}")
            raise DatabaseError("Failed to insert score") from e

        if not status:
            logger.error(f"Insert for {score.name!r} returned no status")
            raise DatabaseError("Failed to insert score")
