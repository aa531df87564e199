import logging
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DineHubError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(DineHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid input"

    def __init__(self, field: Optional[str], reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}" if field else reason)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "field": self.field}


class AuthError(DineHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ConflictError(DineHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Already exists"


class NotFoundError(DineHubError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class UpstreamServiceError(DineHubError):
    """An external service (LLM, QR encoder) failed or answered garbage."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Upstream service failure"


class ConfigurationError(DineHubError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Service is not configured"


class InternalError(DineHubError):
    pass


def first_error(errors) -> ValidationError:
    """Turn a pydantic error list into a ValidationError for its first entry."""
    if not errors:
        return ValidationError(None, "Invalid input")
    err = errors[0]
    parts = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
    field = ".".join(parts) or None
    return ValidationError(field, err.get("msg", "Invalid value"))


async def dinehub_error_handler(request: Request, exc: DineHubError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = first_error(exc.errors())
    return JSONResponse(status_code=err.status_code, content=err.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DineHubError, dinehub_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
