"""
Application-wide error handlers; every error body is {"message": ...}
"""
import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "
LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def first_error_message(errors: Sequence[Dict[str, Any]]) -> str:
    """Human-readable message for the first failing field"""
    if not errors:
        return "Invalid request"
    error = errors[0]
    message = str(error.get("msg", "Invalid request"))
    
    if message.startswith(VALUE_ERROR_PREFIX):
        # Custom validator messages are already phrased for humans
        return message[len(VALUE_ERROR_PREFIX):]
    if error.get("type") == "json_invalid":
        return "Invalid JSON body"
    
    field = ".".join(
        str(part) for part in error.get("loc", ())
        if part not in LOCATION_ROOTS
    )
    return f"{field}: {message}" if field else message


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None)
        )
    
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": first_error_message(exc.errors())}
        )
    
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"}
        )
