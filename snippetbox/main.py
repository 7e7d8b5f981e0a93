"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from snippetbox.api import health
from snippetbox.api.error_handlers import register_error_handlers
from snippetbox.api.snippets import snippet_routes
from snippetbox.api.users import user_routes
from snippetbox.config import get_settings
from snippetbox.middleware import common_headers, log_request, recover_panic
from snippetbox.observability import setup_logging
from snippetbox.templates import TemplateRegistry, new_template_cache

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("snippetbox started")
    yield
    logger.info("snippetbox shutting down")


def create_app(templates: TemplateRegistry | None = None) -> FastAPI:
    """Assemble the application around an already-compiled template registry."""
    if templates is None:
        templates = new_template_cache(get_settings().templates_dir)

    app = FastAPI(
        title="Snippetbox",
        description="Share short-lived text snippets",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    register_error_handlers(app)

    # Register routers
    app.include_router(health.router)
    app.include_router(snippet_routes(templates))
    app.include_router(user_routes(templates))

    # Added innermost first; requests pass recover_panic -> log_request -> common_headers.
    app.add_middleware(common_headers)
    app.add_middleware(log_request)
    app.add_middleware(recover_panic)

    return app


app = create_app()
