"""
Core module initialization.
Exports configuration, error kinds and token utilities.
"""

from app.core.config import get_settings, Settings, EnvironmentMode
from app.core.exceptions import (
    AppError,
    BadRequest,
    Unauthorized,
    Forbidden,
    NotFound,
    GatewayError,
    InternalError,
)

__all__ = [
    "get_settings",
    "Settings",
    "EnvironmentMode",
    "AppError",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "GatewayError",
    "InternalError",
]
