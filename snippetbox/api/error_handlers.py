"""Error handlers: map exceptions reaching the app boundary to plain-text responses.

Client errors (unknown route, malformed request) get their reason phrase
and are not logged. Storage and template faults are logged once here with
method and URI and answered with a bare 500. Anything else falls through to
the recover_panic middleware.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from jinja2 import TemplateError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from snippetbox.middleware import request_context

logger = logging.getLogger(__name__)


def client_error(status_code: int, headers: dict[str, str] | None = None) -> PlainTextResponse:
    """Respond with the standard reason phrase for a client error."""
    return PlainTextResponse(HTTPStatus(status_code).phrase, status_code=status_code, headers=headers)


def server_error(request: Request, exc: Exception) -> PlainTextResponse:
    """Log a fault with request context and respond 500 without details."""
    logger.error(str(exc), exc_info=exc, extra=request_context(request.scope))
    return PlainTextResponse(
        HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return client_error(exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return client_error(status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        return server_error(request, exc)

    @app.exception_handler(TemplateError)
    async def template_error_handler(request: Request, exc: TemplateError):
        return server_error(request, exc)
