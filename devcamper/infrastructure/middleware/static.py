"""静态文件中间件"""
from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles


class StaticFilesMiddleware:
    """请求路径命中公共目录下的文件时直接返回，否则交给后续处理"""

    METHODS = ("GET", "HEAD")

    def __init__(self, app, directory: str):
        self.app = app
        self.files = StaticFiles(directory=directory, html=True, check_dir=False)

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope["method"] not in self.METHODS:
            await self.app(scope, receive, send)
            return

        try:
            response = await self.files.get_response(self.files.get_path(scope), scope)
        except HTTPException:
            await self.app(scope, receive, send)
            return

        await response(scope, receive, send)
