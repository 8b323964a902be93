# retail_store/db/__init__.py
from .connection import DatabaseConnection, QueryResult, db

__all__ = [
    'db',
    'DatabaseConnection',
    'QueryResult'
]
