"""安全相关中间件：安全响应头与速率限制"""
import math
import time
from dataclasses import dataclass
from typing import ClassVar

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger

from devcamper.core.exceptions import create_error_response
from devcamper.core.response import Messages


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """安全响应头中间件"""

    SECURITY_HEADERS: ClassVar[dict] = {
        "Content-Security-Policy": (
            "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
            "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
            "object-src 'none';script-src 'self';script-src-attr 'none';"
            "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
        ),
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "same-origin",
        "Origin-Agent-Cluster": "?1",
        "Referrer-Policy": "no-referrer",
        "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
        "X-Content-Type-Options": "nosniff",
        "X-DNS-Prefetch-Control": "off",
        "X-Download-Options": "noopen",
        "X-Frame-Options": "SAMEORIGIN",
        "X-Permitted-Cross-Domain-Policies": "none",
        "X-XSS-Protection": "0",
    }

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.update(self.SECURITY_HEADERS)
        if "x-powered-by" in response.headers:
            del response.headers["x-powered-by"]
        return response


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimitMiddleware(BaseHTTPMiddleware):
    """固定窗口速率限制中间件（内存实现，多进程部署需改用共享存储）"""

    def __init__(self, app, max_requests: int = 100, window_ms: int = 600_000,
                 trust_proxy: bool = False, clock=time.monotonic):
        super().__init__(app)
        self.max_requests = max_requests
        self.window = window_ms / 1000
        self.trust_proxy = trust_proxy
        self.clock = clock
        self.hits: dict[str, _Window] = {}
        self._last_cleanup = clock()

    async def dispatch(self, request, call_next):
        key = self._get_client_key(request)
        now = self.clock()

        # 定期清理
        if now - self._last_cleanup > self.window:
            self._cleanup_expired(now)
            self._last_cleanup = now

        window = self.hits.get(key)
        if window is None or now >= window.reset_at:
            window = _Window(count=0, reset_at=now + self.window)
            self.hits[key] = window
        window.count += 1

        headers = self._rate_limit_headers(window, now)
        if window.count > self.max_requests:
            logger.warning(f"请求过于频繁: client={key}, count={window.count}")
            headers["Retry-After"] = str(max(1, math.ceil(window.reset_at - now)))
            return create_error_response(
                status.HTTP_429_TOO_MANY_REQUESTS, Messages.TOO_MANY_REQUESTS, headers=headers
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response

    def _get_client_key(self, request) -> str:
        if self.trust_proxy:
            if forwarded := request.headers.get('X-Forwarded-For'):
                return forwarded.split(',')[0].strip()
            if real_ip := request.headers.get('X-Real-IP'):
                return real_ip
        return request.client.host if request.client else 'unknown'

    def _rate_limit_headers(self, window: _Window, now: float) -> dict:
        return {
            "X-RateLimit-Limit": str(self.max_requests),
            "X-RateLimit-Remaining": str(max(0, self.max_requests - window.count)),
            "X-RateLimit-Reset": str(max(0, math.ceil(window.reset_at - now))),
        }

    def _cleanup_expired(self, now: float):
        expired = [key for key, window in self.hits.items() if now >= window.reset_at]
        for key in expired:
            del self.hits[key]
