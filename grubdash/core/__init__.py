"""
Core module initialization.
Exports configuration, logging and error utilities.
"""

from grubdash.core.config import get_settings, Settings, IdStrategy, setup_logging
from grubdash.core.errors import (
    APIError,
    ValidationError,
    NotFoundError,
    MethodNotAllowedError,
)

__all__ = [
    "get_settings",
    "Settings",
    "IdStrategy",
    "setup_logging",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "MethodNotAllowedError",
]
