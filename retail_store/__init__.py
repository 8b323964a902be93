from .config import config
from .db import db
from .logging_setup import logger, get_logger
from .exceptions import (
    RetailError,
    ConfigError,
    DatabaseError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    OrderError
)

__all__ = [
    'config',
    'db',
    'logger',
    'get_logger',
    'RetailError',
    'ConfigError',
    'DatabaseError',
    'ValidationError',
    'AuthenticationError',
    'AuthorizationError',
    'NotFoundError',
    'OrderError'
]
