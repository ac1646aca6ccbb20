"""Route registration module.

Provides the register_routes() function for mounting the resource routers.
"""

from fastapi import FastAPI
from loguru import logger


def register_routes(app: FastAPI, route_table=None) -> None:
    """Mount every router of the route table, in table order.

    Args:
        app: FastAPI application instance.
        route_table: Sequence of RouteMount; defaults to the v1 table.
    """
    if route_table is None:
        from devcamper.api.v1 import ROUTE_TABLE as route_table

    for mount in route_table:
        app.include_router(mount.router, prefix=mount.prefix.rstrip("/"), tags=[mount.tag])
        logger.debug(f"路由已挂载: {mount.prefix} -> {mount.tag}")
