"""Bootstrap module for application initialization.

This module provides:
- Application factory (create_app)
- Lifecycle management (lifespan)
- Route registration (register_routes)
- Server with the unhandled-error hook (APIServer)
"""

from devcamper.bootstrap.app_factory import create_app
from devcamper.bootstrap.lifespan import lifespan
from devcamper.bootstrap.routes import register_routes
from devcamper.bootstrap.server import APIServer

__all__ = ["APIServer", "create_app", "lifespan", "register_routes"]
