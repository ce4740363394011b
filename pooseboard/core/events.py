from contextlib import asynccontextmanager
from fastapi import FastAPI
from ..logger import get_logger
import asyncio

logger = get_logger(__name__)

async def startup_event(app: FastAPI):
    """Open the database pool"""
    try:
        await app.state.db.initialize()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

async def shutdown_event(app: FastAPI):
    """Close database connections"""
    try:
        async with asyncio.timeout(5.0):
            await app.state.db.close()
            logger.info("Database connections closed")
    except TimeoutError:
        logger.warning("Shutdown timed out, abandoning open connections")

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    yield
    await shutdown_event(app)
