"""Application error taxonomy and the handlers that render it.

Services raise the errors below; the handlers turn them into JSON responses
carrying the correlation request_id. Server-side failures are logged with the
full exception chain, clients only ever see the generic detail.
"""

from collections.abc import Sequence
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthenticationError(AppError):
    """Missing, malformed or rejected bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"
    headers = {"WWW-Authenticate": "Bearer"}


class ValidationError(AppError):
    """Required request data is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class NotFoundOrForbidden(AppError):
    """Project does not exist or belongs to someone else.

    The two cases share one response so callers cannot probe for ids.
    """

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Project not found or access denied"


class GenerationError(AppError):
    """The LLM provider failed or returned nothing usable."""

    default_detail = "Failed to generate content"


class ProviderTimeoutError(AppError):
    """An external provider did not answer within its deadline."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_detail = "Upstream provider timed out"


class InternalError(AppError):
    """Datastore or other unexpected server-side failure."""


def _request_id() -> str | None:
    return correlation_id.get()


def _summarize_validation_errors(errors: Sequence[Any]) -> str:
    """Render pydantic errors as a short 'field: message' list."""
    parts = []
    for error in errors[:5]:
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "query")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid')}")
    return "Missing or invalid fields - " + "; ".join(parts)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        request_id = _request_id()
        if exc.status_code >= 500:
            logger.exception(
                "Request failed",
                error_type=type(exc).__name__,
                request_id=request_id,
                path=request.url.path,
                exc_info=exc,
            )
        else:
            logger.info(
                "Request rejected",
                error_type=type(exc).__name__,
                status_code=exc.status_code,
                path=request.url.path,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "request_id": request_id},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": _summarize_validation_errors(exc.errors()),
                "request_id": _request_id(),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "request_id": _request_id()},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = _request_id()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": InternalError.default_detail, "request_id": request_id},
        )
