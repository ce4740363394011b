from ..logger import get_logger

logger = get_logger(__name__)

GET_APIKEY_STMT = 'SELECT apikey FROM api_keys WHERE apikey = $1'

class ApiKeyManager:
    def __init__(self, db_connection):
        self.db = db_connection

    async def is_valid(self, key: str) -> bool:
        """Check that `key` exists in api_keys.

        Lookup failures are logged and count as an unknown key.
        """
        try:
            async with self.db.acquire() as conn:
                found = await conn.fetchval(GET_APIKEY_STMT, key)
        except Exception as e:
            logger.error(f"Database error looking up API key: {e}")
            return False

        return found is not None and found == key
