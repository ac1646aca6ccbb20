"""中间件基础设施模块"""

from devcamper.infrastructure.middleware.access_log import AccessLogMiddleware
from devcamper.infrastructure.middleware.body import (
    CookieParserMiddleware,
    FileUploadMiddleware,
    JSONBodyMiddleware,
)
from devcamper.infrastructure.middleware.errors import ErrorHandlerMiddleware
from devcamper.infrastructure.middleware.middleware import (
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from devcamper.infrastructure.middleware.pipeline import (
    PIPELINE,
    PipelineStage,
    build_pipeline,
    make_middlewares,
)
from devcamper.infrastructure.middleware.sanitize import (
    HPPMiddleware,
    MongoSanitizeMiddleware,
    XSSCleanMiddleware,
)
from devcamper.infrastructure.middleware.static import StaticFilesMiddleware

__all__ = [
    "AccessLogMiddleware",
    "CookieParserMiddleware",
    "ErrorHandlerMiddleware",
    "FileUploadMiddleware",
    "HPPMiddleware",
    "JSONBodyMiddleware",
    "MongoSanitizeMiddleware",
    "PIPELINE",
    "PipelineStage",
    "RateLimitMiddleware",
    "SecurityHeadersMiddleware",
    "StaticFilesMiddleware",
    "XSSCleanMiddleware",
    "build_pipeline",
    "make_middlewares",
]
