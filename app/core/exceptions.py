import logging
from typing import Dict, Optional, Tuple, Type

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.requests import Request
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# ---------------------------
# CRUD (Database abstraction)
# ---------------------------

class DatabaseError(Exception):
    """Base class for all database-related errors."""
    pass

class StoreUnavailableError(DatabaseError):
    """Raised when the backing database cannot be reached."""
    pass

class DatabaseIntegrityError(DatabaseError):
    """Raised when a row violates a column constraint (e.g., NOT NULL)."""
    pass

# ---------------------------
# Service (Business logic)
# ---------------------------

class BusinessError(Exception):
    """Base class for all business logic errors."""
    pass

class NotFoundError(BusinessError):
    """Raised when a requested resource does not exist."""
    pass

class ValidationError(BusinessError):
    """Raised when a record fails required-field, enum or type constraints."""
    pass

class MalformedPayloadError(BusinessError):
    """Raised when a bulk payload lacks its expected array."""
    pass


# ---------------------------
# Envelope mapping
# ---------------------------

# exception -> (status code, public message); None keeps str(exc)
ERROR_MAP: Dict[Type[Exception], Tuple[int, Optional[str]]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, None),
    MalformedPayloadError: (status.HTTP_400_BAD_REQUEST, None),
    DatabaseIntegrityError: (status.HTTP_400_BAD_REQUEST, "Record violates a storage constraint"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, None),
    StoreUnavailableError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Database unavailable"),
    DatabaseError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def _format_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


# ---------------------------
# FastAPI Exception Handlers
# ---------------------------

def register_exception_handlers(app):
    async def mapped_error_handler(request: Request, exc: Exception):
        for exc_type in type(exc).__mro__:
            if exc_type in ERROR_MAP:
                status_code, message = ERROR_MAP[exc_type]
                break
        else:
            status_code, message = status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"

        if status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return error_response(status_code, message or str(exc))

    for exc_type in ERROR_MAP:
        app.add_exception_handler(exc_type, mapped_error_handler)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            _format_validation_errors(exc.errors()),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
