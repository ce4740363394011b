"""Errors surfaced to API callers.

Every error here is rendered as ``{"error": message}`` with its status code.
Messages are meant for clients; the underlying cause is logged, never returned.
"""


class APIError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthorizationError(APIError):
    status_code = 403


class MissingFieldError(APIError):
    """A required Score field is missing"""


class DecodeError(APIError):
    """The request body could not be decoded into a Score"""


class StoreError(APIError):
    """The database failed while serving the request"""
