"""
Error‑to‑response mapping.

Every failure leaves the API as a JSON object with a single ``error``
string.  HTTP exceptions raised by endpoints keep their status code,
request validation problems become 422 and anything unexpected is
logged with its traceback and reported as a bare 500.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers with ``app``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Keeps headers such as Allow on 405.
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report the first offending field, e.g. ``studentIds.0: Input should be a valid integer``."""
        errors = exc.errors()
        if not errors:
            return error_response(422, "Invalid request")
        first = errors[0]
        field = ".".join(str(loc) for loc in first.get("loc", ()) if loc not in ("body", "path", "query"))
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return error_response(422, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
