"""v1 路由表：路径前缀按注册顺序匹配，先匹配者生效"""
from dataclasses import dataclass

from fastapi import APIRouter

from devcamper.api.v1.auth import router as auth_router
from devcamper.api.v1.bootcamps import router as bootcamps_router
from devcamper.api.v1.courses import router as courses_router
from devcamper.api.v1.reviews import router as reviews_router
from devcamper.api.v1.users import router as users_router


@dataclass(frozen=True)
class RouteMount:
    prefix: str
    router: APIRouter
    tag: str


ROUTE_TABLE = (
    RouteMount("/api/v1/bootcamps", bootcamps_router, "bootcamps"),
    RouteMount("/api/v1/courses", courses_router, "courses"),
    RouteMount("/api/v1/auth", auth_router, "auth"),
    RouteMount("/api/v1/users", users_router, "users"),
    RouteMount("/api/v1/reviews", reviews_router, "reviews"),
)

__all__ = ["ROUTE_TABLE", "RouteMount"]
