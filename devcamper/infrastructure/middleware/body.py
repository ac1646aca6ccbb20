"""请求体解析中间件：JSON、Cookie、文件上传"""
import json

from starlette.datastructures import UploadFile
from starlette.middleware.base import BaseHTTPMiddleware

from devcamper.core.exceptions import JSONParseException, PayloadTooLargeException


def _media_type(request) -> str:
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


def _is_json(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """JSON 请求体解析，结果写入 request.state.body"""

    def __init__(self, app, limit: int = 100 * 1024):
        super().__init__(app)
        self.limit = limit

    async def dispatch(self, request, call_next):
        request.state.body = {}

        if _is_json(_media_type(request)):
            raw = await self._read(request)
            if raw.strip():
                request.state.body = self._parse(raw)

        return await call_next(request)

    async def _read(self, request) -> bytes:
        """按限制读取请求体，超限立即中止，不缓存剩余部分"""
        declared = request.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > self.limit:
            raise PayloadTooLargeException(int(declared), self.limit)

        chunks = []
        received = 0
        async for chunk in request.stream():
            received += len(chunk)
            if received > self.limit:
                raise PayloadTooLargeException(received, self.limit)
            chunks.append(chunk)

        raw = b"".join(chunks)
        # 与 request.body() 一致地缓存，下游中间件和路由仍可读取
        request._body = raw
        return raw

    @staticmethod
    def _parse(raw: bytes):
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            raise JSONParseException(str(e))
        # 只接受对象和数组
        if not isinstance(parsed, (dict, list)):
            raise JSONParseException("top-level value must be an object or array")
        return parsed


class CookieParserMiddleware(BaseHTTPMiddleware):
    """Cookie 解析"""

    async def dispatch(self, request, call_next):
        request.state.cookies = dict(request.cookies)
        return await call_next(request)


class FileUploadMiddleware(BaseHTTPMiddleware):
    """multipart 表单解析：文件写入 request.state.files，字段合并进 request.state.body"""

    async def dispatch(self, request, call_next):
        request.state.files = {}

        if _media_type(request) == "multipart/form-data":
            # 先缓存原始请求体，下游仍可读取
            await request.body()
            form = await request.form()

            body = getattr(request.state, "body", None)
            if not isinstance(body, dict):
                body = {}
            for name, value in form.multi_items():
                if isinstance(value, UploadFile):
                    self._attach(request.state.files, name, value)
                else:
                    self._attach(body, name, value)
            request.state.body = body

        return await call_next(request)

    @staticmethod
    def _attach(target: dict, name: str, value):
        if name not in target:
            target[name] = value
        elif isinstance(target[name], list):
            target[name].append(value)
        else:
            target[name] = [target[name], value]
