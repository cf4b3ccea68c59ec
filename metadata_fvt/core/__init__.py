"""Core infrastructure: settings, logging, exceptions."""

from .config import Settings, get_settings, settings
from .exceptions import (
    ConnectorCheckedError,
    EntityNotKnownError,
    FunctionNotSupportedError,
    FVTException,
    InvalidParameterError,
    PagingError,
    PropertyError,
    PropertyServerError,
    RepositoryError,
    TypeErrorException,
    UserNotAuthorizedError,
    error_from_response,
    is_error_response,
)
from .logging import get_logger, setup_logging


__all__ = [
    "ConnectorCheckedError",
    "EntityNotKnownError",
    "FVTException",
    "FunctionNotSupportedError",
    "InvalidParameterError",
    "PagingError",
    "PropertyError",
    "PropertyServerError",
    "RepositoryError",
    "Settings",
    "TypeErrorException",
    "UserNotAuthorizedError",
    "error_from_response",
    "get_logger",
    "get_settings",
    "is_error_response",
    "settings",
    "setup_logging",
]
