"""开发环境访问日志中间件"""
import time

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class AccessLogMiddleware(BaseHTTPMiddleware):
    """按 `METHOD url status latency ms - length` 格式输出访问日志"""

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {url} - {elapsed:.3f} ms - -")
            raise

        elapsed = (time.perf_counter() - start) * 1000
        length = response.headers.get("content-length", "-")
        logger.info(f"{request.method} {url} {response.status_code} {elapsed:.3f} ms - {length}")
        return response
