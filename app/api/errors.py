"""Fault-to-500 mapping for API routes.

HTTP and request-validation exceptions pass through to the app handlers so
auth and role failures keep their own status codes.
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"error": "Internal server error"}


def internal_error_response() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR)


class GuardedRoute(APIRoute):
    """Route class that converts any unexpected fault into the generic 500 envelope."""

    def get_route_handler(self) -> Callable:
        original_handler = super().get_route_handler()
        handler_name = self.name

        async def guarded_handler(request: Request) -> Response:
            try:
                return await original_handler(request)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except Exception:
                logger.exception(
                    f"{handler_name} error",
                    extra={"path": request.url.path, "method": request.method, "handler": handler_name},
                )
                return internal_error_response()

        return guarded_handler


def register_error_handlers(app: FastAPI) -> None:
    """HTTP errors share the {"error": ...} envelope; the catch-all covers unguarded routes."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return internal_error_response()
