"""Global exception handlers mapping service errors to {"error": ...} responses"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_points.api.dependencies import get_request_id
from receipt_points.domain.exceptions import (
    ErrorKind,
    InternalServiceError,
    InvalidReceiptError,
    ReceiptServiceError,
)

logger = logging.getLogger(__name__)


def error_response(exc: ReceiptServiceError) -> JSONResponse:
    """Render a tagged service error using its status classification"""
    return JSONResponse(status_code=exc.kind.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app"""

    @app.exception_handler(ReceiptServiceError)
    async def service_error_handler(request: Request, exc: ReceiptServiceError):
        extra = {"request_id": get_request_id(request), "path": request.url.path, "error_kind": exc.kind.name}
        if exc.kind is ErrorKind.INTERNAL:
            logger.error(f"Internal error: {exc.message}", extra=extra)
        else:
            logger.warning(exc.message, extra=extra)
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Malformed JSON, missing fields and bad amounts all surface as one message
        logger.warning(
            f"Invalid receipt on {request.url.path}: {exc.errors()}",
            extra={"request_id": get_request_id(request)},
        )
        return error_response(InvalidReceiptError())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Routing failures (unknown path, wrong method) keep the shared error shape
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # Served by the outermost middleware, so the request id header is set here
        request_id = get_request_id(request)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"request_id": request_id},
        )
        response = error_response(InternalServiceError())
        response.headers["X-Request-ID"] = request_id
        return response
