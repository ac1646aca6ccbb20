"""全局错误处理中间件"""
from starlette.middleware.base import BaseHTTPMiddleware

from devcamper.core.exceptions import error_handler


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """捕获管道各阶段及路由未处理的异常，统一生成错误响应"""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await error_handler(request, exc)
