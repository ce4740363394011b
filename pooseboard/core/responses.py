from fastapi.responses import ORJSONResponse
from ..config import server

class CharsetORJSONResponse(ORJSONResponse):
    """ORJSONResponse that declares the configured charset on its Content-Type"""
    media_type = f"application/json; charset={server.RESPONSE_CHARSET}"
