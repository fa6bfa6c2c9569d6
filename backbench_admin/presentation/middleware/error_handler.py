"""Error handling middleware and exception handlers.

Every failure leaves the service as ``{"success": false, "error": ...}``
so the dashboard can render one generic failure state.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from backbench_admin.domain.exceptions import (
    AdminAuthNotConfiguredException,
    DataStoreException,
    DomainException,
    InvalidRequestException,
    StoreTimeoutException,
    StudentNotFoundException,
    UnauthorizedException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build the uniform error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "code": code,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(UnauthorizedException)
    async def unauthorized_handler(
        request: Request,
        exc: UnauthorizedException,
    ) -> JSONResponse:
        """Handle missing or invalid admin sessions."""
        return error_response(401, exc.code, exc.message)

    @app.exception_handler(InvalidRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return error_response(400, exc.code, exc.message)

    @app.exception_handler(StudentNotFoundException)
    async def student_not_found_handler(
        request: Request,
        exc: StudentNotFoundException,
    ) -> JSONResponse:
        """Handle student not found errors."""
        return error_response(404, exc.code, exc.message)

    @app.exception_handler(AdminAuthNotConfiguredException)
    async def auth_not_configured_handler(
        request: Request,
        exc: AdminAuthNotConfiguredException,
    ) -> JSONResponse:
        """Handle admin login attempted without a configured secret."""
        return error_response(500, exc.code, exc.message)

    @app.exception_handler(StoreTimeoutException)
    async def store_timeout_handler(
        request: Request,
        exc: StoreTimeoutException,
    ) -> JSONResponse:
        """Handle data store timeouts."""
        logger.error(
            "store_timeout",
            operation=exc.operation,
            timeout=exc.timeout,
        )
        return error_response(
            503,
            exc.code,
            "Service temporarily unavailable. Please try again.",
        )

    @app.exception_handler(DataStoreException)
    async def data_store_error_handler(
        request: Request,
        exc: DataStoreException,
    ) -> JSONResponse:
        """Handle data store errors with a single opaque message."""
        logger.error(
            "data_store_error",
            operation=exc.operation,
            message=exc.message,
            status_code=exc.status_code,
        )
        return error_response(503, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return error_response(400, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        return error_response(400, "INVALID_REQUEST", f"Invalid request: {details}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle routing errors such as unknown paths and methods."""
        return error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
