"""
API Error Types and Handlers

Every failure the API reports is an APIError carrying an HTTP status
and a human readable message. The handlers registered here render
all of them, plus Starlette's routing errors and anything unexpected,
as ``{"error": message}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors surfaced to the client verbatim."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(APIError):
    """A required field is missing or malformed (400)."""

    status_code = 400


class NotFoundError(APIError):
    """The referenced id or path does not exist (404)."""

    status_code = 404


class MethodNotAllowedError(APIError):
    """The verb is not wired for a known path (405)."""

    status_code = 405


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Attach the terminal error handlers to ``app``."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.info(
            f"{request.method} {request.url.path} rejected "
            f"({exc.status_code}): {exc.message}"
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 405:
            error: APIError = MethodNotAllowedError(
                f"{request.method} not allowed for {request.url.path}"
            )
        elif exc.status_code == 404:
            error = NotFoundError(f"Path not found: {request.url.path}")
        else:
            error = APIError(str(exc.detail), exc.status_code)

        logger.debug(f"{request.method} {request.url.path}: {error.message}")
        response = error_response(error.status_code, error.message)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")

        if debug:
            return error_response(500, "Internal Server Error", detail=str(exc))
        return error_response(500, "Internal Server Error")
