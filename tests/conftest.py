"""测试公共配置"""
import os

# 必须在导入 devcamper 之前设置
os.environ.setdefault("PORT", "5000")
os.environ["NODE_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ["LOG_TO_FILE"] = "false"
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

import pytest
from fastapi import APIRouter, Request
from loguru import logger

from devcamper.api.v1 import RouteMount
from devcamper.core.config import Settings

PREFIXES = (
    ("/api/v1/bootcamps", "bootcamps"),
    ("/api/v1/courses", "courses"),
    ("/api/v1/auth", "auth"),
    ("/api/v1/users", "users"),
    ("/api/v1/reviews", "reviews"),
)


def make_settings(**overrides) -> Settings:
    values = {
        "PORT": 5000,
        "NODE_ENV": "test",
        "DATABASE_URL": "sqlite://:memory:",
        "JWT_SECRET": "test-jwt-secret",
        "LOG_TO_FILE": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _echo_router(name, hits):
    router = APIRouter()

    @router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
    async def echo(request: Request, path: str):
        hits.append(name)
        files = getattr(request.state, "files", {})
        return {
            "router": name,
            "path": path,
            "body": getattr(request.state, "body", None),
            "cookies": getattr(request.state, "cookies", None),
            "query": dict(request.query_params),
            "polluted": getattr(request.state, "query_polluted", None),
            "files": {key: value.filename for key, value in files.items()},
        }

    return router


def make_echo_table(hits):
    """与真实路由表前缀一致的回显路由，记录命中的路由名"""
    return [RouteMount(prefix, _echo_router(name, hits), name) for prefix, name in PREFIXES]


@pytest.fixture
def hits():
    return []


@pytest.fixture
def capture_logs():
    """在 create_app() 之后调用，setup_logging 会移除已有的 handler"""
    handler_ids = []

    def capture():
        messages = []
        handler_ids.append(
            logger.add(lambda message: messages.append(str(message).rstrip("\n")), format="{message}")
        )
        return messages

    yield capture
    for handler_id in handler_ids:
        logger.remove(handler_id)
