"""请求处理管道

管道阶段按请求经过的顺序声明，make_middlewares() 据此生成 FastAPI 中间件列表。
全局错误处理位于最外层，路由分发位于管道末端。
"""
from dataclasses import dataclass, field
from typing import Callable

from fastapi.middleware import Middleware
from fastapi.middleware.cors import CORSMiddleware

from devcamper.infrastructure.middleware.access_log import AccessLogMiddleware
from devcamper.infrastructure.middleware.body import (
    CookieParserMiddleware, FileUploadMiddleware, JSONBodyMiddleware
)
from devcamper.infrastructure.middleware.errors import ErrorHandlerMiddleware
from devcamper.infrastructure.middleware.middleware import (
    RateLimitMiddleware, SecurityHeadersMiddleware
)
from devcamper.infrastructure.middleware.sanitize import (
    HPPMiddleware, MongoSanitizeMiddleware, XSSCleanMiddleware
)
from devcamper.infrastructure.middleware.static import StaticFilesMiddleware


def _always(config) -> bool:
    return True


def _no_options(config) -> dict:
    return {}


@dataclass(frozen=True)
class PipelineStage:
    """管道阶段描述"""

    name: str
    middleware: type
    options: Callable[..., dict] = field(default=_no_options)
    enabled: Callable[..., bool] = field(default=_always)


PIPELINE = (
    PipelineStage("json", JSONBodyMiddleware, options=lambda c: {"limit": c.BODY_LIMIT}),
    PipelineStage("cookies", CookieParserMiddleware),
    PipelineStage("access_log", AccessLogMiddleware, enabled=lambda c: c.is_development),
    PipelineStage("file_upload", FileUploadMiddleware),
    PipelineStage("sanitize", MongoSanitizeMiddleware),
    PipelineStage("security_headers", SecurityHeadersMiddleware),
    PipelineStage("xss", XSSCleanMiddleware),
    PipelineStage(
        "rate_limit",
        RateLimitMiddleware,
        options=lambda c: {"max_requests": c.RATE_LIMIT_MAX, "window_ms": c.RATE_LIMIT_WINDOW_MS},
    ),
    PipelineStage("hpp", HPPMiddleware),
    PipelineStage(
        "cors",
        CORSMiddleware,
        options=lambda c: {
            "allow_origins": ["*"],
            "allow_methods": c.CORS_ALLOW_METHODS,
            "allow_headers": ["*"],
        },
    ),
    PipelineStage("static", StaticFilesMiddleware, options=lambda c: {"directory": c.public_dir}),
)


def build_pipeline(config, stages=PIPELINE) -> list[PipelineStage]:
    """返回当前配置下启用的管道阶段（保持声明顺序）"""
    return [stage for stage in stages if stage.enabled(config)]


def make_middlewares(config=None):
    """Create middleware list for FastAPI application.

    Returns:
        list: List of Middleware instances, outermost first.
    """
    if config is None:
        from devcamper.core.config import settings as config

    middleware = [Middleware(ErrorHandlerMiddleware)]
    middleware.extend(
        Middleware(stage.middleware, **stage.options(config))
        for stage in build_pipeline(config)
    )
    return middleware
