"""Application factory module.

Provides the create_app() factory function for creating FastAPI application instances.
"""

from fastapi import FastAPI

from devcamper.bootstrap.lifespan import lifespan
from devcamper.bootstrap.routes import register_routes
from devcamper.core.config import settings
from devcamper.core.exceptions import HANDLED_EXCEPTIONS, error_handler
from devcamper.core.logging import setup_logging
from devcamper.infrastructure.middleware import make_middlewares


def create_app(config=None, route_table=None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings instance; the module-level settings by default.
        route_table: Optional replacement for the v1 route table.

    Returns:
        FastAPI: Configured application instance.
    """
    config = config or settings
    setup_logging(config)

    docs_enabled = config.is_development
    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description=config.APP_DESCRIPTION,
        middleware=make_middlewares(config),
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = config

    # Errors raised inside routers; anything else reaches ErrorHandlerMiddleware
    for exc_class in HANDLED_EXCEPTIONS:
        app.add_exception_handler(exc_class, error_handler)

    register_routes(app, route_table)

    return app
