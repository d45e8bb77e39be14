# photo_api/core/errors.py
"""
Todas las respuestas de error salen como {"error": "<mensaje>"}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from photo_api.core.json import error_response

log = logging.getLogger("uvicorn")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        exc.detail, exc.status_code, headers=getattr(exc, "headers", None)
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # body mal formado, tipos incorrectos o ids no numéricos -> 400
    return error_response(_validation_message(exc), status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception):
    log.error(f"error no controlado en {request.method} {request.url.path}", exc_info=exc)
    return error_response("Internal server error", 500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
