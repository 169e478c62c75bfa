# jobboard/core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def first_error_message(exc: RequestValidationError) -> str:
    """Human-readable message for the first failing field only."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]

    if error.get("type") == "json_invalid":
        return "Invalid JSON body"
    if str(error.get("msg", "")).startswith("value is not a valid email address"):
        return "Invalid email address"

    # Messages raised from our own validators are passed through untouched
    ctx_error = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)

    loc = [part for part in error.get("loc", ()) if part != "body"]
    field = str(loc[-1]) if loc else "body"
    if error.get("type") == "missing":
        return f"{field} is required"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": first_error_message(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"message": ...}."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
