"""Client error taxonomy and mapping from platform error responses."""

from __future__ import annotations

from typing import Any, Mapping

import httpx


class FVTException(Exception):
    """Base client exception with a structured error payload."""

    status_code: int = httpx.codes.INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"
    message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.status_code = status_code or self.status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a problem+json style mapping."""
        return {
            "error": self.error_code,
            "message": self.message,
            "status": self.status_code,
            **({"details": self.details} if self.details else {}),
        }


class InvalidParameterError(FVTException):
    """A request parameter was rejected."""

    status_code = httpx.codes.BAD_REQUEST
    error_code = "INVALID_PARAMETER"
    message = "Invalid parameter"


class UserNotAuthorizedError(FVTException):
    """The caller identity may not perform the operation."""

    status_code = httpx.codes.UNAUTHORIZED
    error_code = "USER_NOT_AUTHORIZED"
    message = "User not authorized"


class PropertyServerError(FVTException):
    """The property server failed while handling the request."""

    status_code = httpx.codes.INTERNAL_SERVER_ERROR
    error_code = "PROPERTY_SERVER_ERROR"
    message = "Property server error"


class ConnectorCheckedError(FVTException):
    """The platform could not be reached or its connector failed."""

    status_code = httpx.codes.SERVICE_UNAVAILABLE
    error_code = "CONNECTOR_CHECKED_ERROR"
    message = "Connector error"


class FunctionNotSupportedError(FVTException):
    """The repository does not support the requested function."""

    status_code = httpx.codes.NOT_IMPLEMENTED
    error_code = "FUNCTION_NOT_SUPPORTED"
    message = "Function not supported"


class TypeErrorException(FVTException):
    """A type identifier is unknown to the repository."""

    status_code = httpx.codes.BAD_REQUEST
    error_code = "TYPE_ERROR"
    message = "Type error"


class PropertyError(FVTException):
    """A property is invalid for the requested type."""

    status_code = httpx.codes.BAD_REQUEST
    error_code = "PROPERTY_ERROR"
    message = "Property error"


class PagingError(FVTException):
    """Paging parameters were rejected."""

    status_code = httpx.codes.BAD_REQUEST
    error_code = "PAGING_ERROR"
    message = "Paging error"


class RepositoryError(FVTException):
    """The metadata repository failed."""

    status_code = httpx.codes.INTERNAL_SERVER_ERROR
    error_code = "REPOSITORY_ERROR"
    message = "Repository error"


class EntityNotKnownError(FVTException):
    """The requested entity does not exist."""

    status_code = httpx.codes.NOT_FOUND
    error_code = "ENTITY_NOT_KNOWN"
    message = "Entity not known"


# Simple exception class names used by the platform, including the
# repository-services names for the same conditions.
_EXCEPTIONS_BY_CLASS_NAME: dict[str, type[FVTException]] = {
    "InvalidParameterException": InvalidParameterError,
    "UserNotAuthorizedException": UserNotAuthorizedError,
    "PropertyServerException": PropertyServerError,
    "ConnectorCheckedException": ConnectorCheckedError,
    "FunctionNotSupportedException": FunctionNotSupportedError,
    "TypeErrorException": TypeErrorException,
    "TypeDefNotKnownException": TypeErrorException,
    "PropertyErrorException": PropertyError,
    "PagingErrorException": PagingError,
    "RepositoryErrorException": RepositoryError,
    "EntityNotKnownException": EntityNotKnownError,
}


def _exception_for_status(status: int) -> type[FVTException]:
    if status == httpx.codes.BAD_REQUEST:
        return InvalidParameterError
    if status in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
        return UserNotAuthorizedError
    if status == httpx.codes.NOT_FOUND:
        return EntityNotKnownError
    if status == httpx.codes.NOT_IMPLEMENTED:
        return FunctionNotSupportedError
    return PropertyServerError


def error_from_response(body: Mapping[str, Any], status: int) -> FVTException:
    """Build the taxonomy exception described by a platform error response.

    The platform reports failures both through the HTTP status and through
    ``relatedHTTPCode``/``exceptionClassName`` fields in a 200 response body.
    """
    class_name = str(body.get("exceptionClassName") or "")
    simple_name = class_name.rsplit(".", 1)[-1]
    related = body.get("relatedHTTPCode")
    code = int(related) if isinstance(related, int) and related >= 400 else status

    exc_type = _EXCEPTIONS_BY_CLASS_NAME.get(simple_name) or _exception_for_status(code)

    details = {
        key: body[key]
        for key in ("exceptionClassName", "exceptionSystemAction", "exceptionUserAction", "actionDescription")
        if body.get(key)
    }
    return exc_type(
        message=body.get("exceptionErrorMessage") or None,
        status_code=code,
        details=details,
    )


def is_error_response(body: Mapping[str, Any], status: int) -> bool:
    """True when either the HTTP status or the body reports a failure."""
    if status >= 400:
        return True
    related = body.get("relatedHTTPCode")
    if isinstance(related, int) and related >= 400:
        return True
    return bool(body.get("exceptionClassName"))
