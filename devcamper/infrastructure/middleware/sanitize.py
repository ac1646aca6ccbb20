"""输入清洗中间件：操作符注入、XSS、HTTP 参数污染"""
import re
from urllib.parse import parse_qsl, urlencode

from starlette.middleware.base import BaseHTTPMiddleware

PROHIBITED_KEY = re.compile(r"^\$|\.")
KEY_SEGMENTS = re.compile(r"[\[\]]+")


def get_query_pairs(scope) -> list[tuple[str, str]]:
    query_string = scope.get("query_string", b"").decode("latin-1")
    return parse_qsl(query_string, keep_blank_values=True)


def set_query_pairs(scope, pairs):
    scope["query_string"] = urlencode(pairs).encode("latin-1")


def is_prohibited_key(key: str) -> bool:
    """键以 $ 开头或包含 .；查询参数键按 a[b][c] 分段检查"""
    return any(PROHIBITED_KEY.search(seg) for seg in KEY_SEGMENTS.split(key) if seg)


def strip_prohibited_keys(value):
    if isinstance(value, dict):
        return {
            k: strip_prohibited_keys(v)
            for k, v in value.items()
            if not is_prohibited_key(str(k))
        }
    if isinstance(value, list):
        return [strip_prohibited_keys(item) for item in value]
    return value


def escape_html(value):
    if isinstance(value, str):
        return value.replace("<", "&lt;")
    if isinstance(value, dict):
        return {k: escape_html(v) for k, v in value.items()}
    if isinstance(value, list):
        return [escape_html(item) for item in value]
    return value


class MongoSanitizeMiddleware(BaseHTTPMiddleware):
    """移除请求体与查询参数中形如数据库操作符的键"""

    async def dispatch(self, request, call_next):
        body = getattr(request.state, "body", None)
        if body:
            request.state.body = strip_prohibited_keys(body)

        pairs = get_query_pairs(request.scope)
        cleaned = [(k, v) for k, v in pairs if not is_prohibited_key(k)]
        if len(cleaned) != len(pairs):
            set_query_pairs(request.scope, cleaned)

        return await call_next(request)


class XSSCleanMiddleware(BaseHTTPMiddleware):
    """转义请求体与查询参数中的 HTML 标签起始符"""

    async def dispatch(self, request, call_next):
        body = getattr(request.state, "body", None)
        if body:
            request.state.body = escape_html(body)

        pairs = get_query_pairs(request.scope)
        if any("<" in v for _, v in pairs):
            set_query_pairs(request.scope, [(k, escape_html(v)) for k, v in pairs])

        return await call_next(request)


class HPPMiddleware(BaseHTTPMiddleware):
    """HTTP 参数污染防护：重复的查询参数只保留最后一个值"""

    async def dispatch(self, request, call_next):
        pairs = get_query_pairs(request.scope)
        collapsed: dict[str, str] = {}
        polluted: dict[str, list[str]] = {}

        for key, value in pairs:
            if key in collapsed:
                polluted.setdefault(key, [collapsed[key]]).append(value)
            collapsed[key] = value

        request.state.query_polluted = polluted
        if polluted:
            set_query_pairs(request.scope, list(collapsed.items()))

        return await call_next(request)
