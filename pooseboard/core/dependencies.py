from fastapi import Depends, Request
from ..errors import AuthorizationError
from ..logger import get_logger

logger = get_logger(__name__)

API_KEY_PARAM = "apikey"

def get_db(request: Request):
    """Return the store built at startup"""
    return request.app.state.db

async def authorize(request: Request, db=Depends(get_db)):
    """Reject the request unless its `apikey` query parameter is a known key.

    Every request re-checks the key against the store; nothing is cached.
    """
    keys = request.query_params.getlist(API_KEY_PARAM)
    apikey = keys[0] if keys else ""

    if not apikey:
        raise AuthorizationError("Not Authorized - Missing API Key")

    if not await db.is_valid_api_key(apikey):
        logger.warning(f"Invalid API key on {request.method} {request.url.path}")
        raise AuthorizationError("Not Authorized - Invalid API Key")
