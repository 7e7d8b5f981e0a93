"""Request middleware.

Each middleware is a function taking the next ASGI app and returning a new
one. `main.create_app` registers them so that, outermost first, a request
passes through recover_panic -> log_request -> common_headers.
"""

import logging

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

COMMON_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; style-src 'self' fonts.googleapis.com; font-src fonts.gstatic.com"
    ),
    "Referrer-Policy": "origin-when-cross-origin",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "deny",
    "X-XSS-Protection": "0",
    "Server": "snippetbox",
}


def request_context(scope: Scope) -> dict[str, str]:
    """Method and URI of the request, for log records."""
    request = Request(scope)
    uri = request.url.path
    if request.url.query:
        uri = f"{uri}?{request.url.query}"
    return {"method": request.method, "uri": uri}


def recover_panic(app: ASGIApp) -> ASGIApp:
    """Turn any exception escaping the inner layers into a 500 and close the connection."""

    async def middleware(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception as exc:
            logger.error(
                f"recovered from unhandled exception: {exc!r}",
                exc_info=True,
                extra=request_context(scope),
            )
            if response_started:
                # Headers are already out; let the server drop the connection.
                raise
            response = PlainTextResponse(
                "Internal Server Error",
                status_code=500,
                headers={**COMMON_HEADERS, "Connection": "close"},
            )
            await response(scope, receive, send)

    return middleware


def log_request(app: ASGIApp) -> ASGIApp:
    """Log protocol, method, URI and remote address of every request."""

    async def middleware(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            client = scope.get("client")
            logger.info(
                "received request",
                extra={
                    "proto": f"HTTP/{scope.get('http_version', '1.1')}",
                    "ip": client[0] if client else "",
                    **request_context(scope),
                },
            )
        await app(scope, receive, send)

    return middleware


def common_headers(app: ASGIApp) -> ASGIApp:
    """Set the defensive response headers on every response."""

    async def middleware(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in COMMON_HEADERS.items():
                    headers[name] = value
            await send(message)

        await app(scope, receive, send_wrapper)

    return middleware
