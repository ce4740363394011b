from .score import Score
from .response import ErrorResponse, HealthResponse

__all__ = ['Score', 'ErrorResponse', 'HealthResponse']
