# pooseboard API

import time
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.events import lifespan
from .core.responses import CharsetORJSONResponse
from .database import DatabaseManager
from .errors import APIError
from .models.response import ErrorResponse
from .routes import health_router, scores_router
from .logger import get_logger

logger = get_logger(__name__)

NOT_FOUND_BODY = "Game over poose!"

def create_app(db=None) -> FastAPI:
    """Build the application around a store; a DatabaseManager is created when none is given"""
    app = FastAPI(
        default_response_class=CharsetORJSONResponse,
        title="PooseBoard",
        description="Leaderboard service storing name/score pairs behind a shared API key",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.db = db if db is not None else DatabaseManager()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        client = request.client.host if request.client else "-"
        logger.info(f"Started {request.method} {request.url.path} for {client}")
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(f"Completed {response.status_code} in {elapsed:.1f}ms")
        return response

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        body = ErrorResponse(error=exc.message)
        return CharsetORJSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        # unknown paths and unsupported methods both end the game
        if exc.status_code in (404, 405):
            return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return CharsetORJSONResponse(status_code=500, content={"error": "Internal server error"})

    app.include_router(scores_router)
    app.include_router(health_router)
    return app

app = create_app()
