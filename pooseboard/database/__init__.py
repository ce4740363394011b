from .base import DatabaseManager
from .connection import DatabaseConnection, DatabaseError

__all__ = ['DatabaseManager', 'DatabaseConnection', 'DatabaseError']
