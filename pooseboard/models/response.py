from pydantic import BaseModel
from typing import Literal

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
