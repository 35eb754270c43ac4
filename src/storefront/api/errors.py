"""Mapping of domain and framework exceptions to HTTP responses.

Protean's FastAPI integration registers the framework defaults; the storefront
then overrides the cases where its clients expect a specific body:

- ``ObjectNotFoundError`` (and ``NotFoundError``) -> 404 ``{"message"}``
- ``ValidationError`` and its subclasses -> 400 ``{"message", "errors"}``
- request body/query validation -> 400 ``{"message", "errors"}``
- anything else -> 500 with a generic message; the traceback is only logged
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers as register_protean_handlers

from storefront.exceptions import NotFoundError

logger = structlog.get_logger(__name__)


def _first_message(messages) -> str:
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, (list, tuple)) and value:
                return str(value[0])
            if value:
                return str(value)
    return "Invalid request"


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    message = exc.message if isinstance(exc, NotFoundError) else "Not found"
    return JSONResponse(status_code=404, content={"message": message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
    return JSONResponse(
        status_code=400,
        content={"message": _first_message(messages), "errors": jsonable_encoder(messages)},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": errors},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the storefront's error responses on ``app``."""
    register_protean_handlers(app)

    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
