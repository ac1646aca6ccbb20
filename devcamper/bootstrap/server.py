"""Uvicorn server with a fail-fast handler for unhandled asyncio errors."""

import asyncio

import uvicorn
from loguru import logger


class APIServer(uvicorn.Server):
    """uvicorn.Server that stops and reports exit code 1 on unhandled loop errors."""

    def __init__(self, config: uvicorn.Config, node_env: str = "production"):
        super().__init__(config)
        self.node_env = node_env
        self.exit_code = 0

    async def serve(self, sockets=None):
        asyncio.get_running_loop().set_exception_handler(self.handle_unhandled_error)
        await super().serve(sockets=sockets)

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server running in {self.node_env} mode on port {self.config.port}")

    def handle_unhandled_error(self, loop, context):
        exc = context.get("exception")
        message = str(exc) if exc is not None else context.get("message", "unknown error")
        logger.opt(exception=exc).error(f"Error: {message}")

        # 关闭监听后以状态码 1 退出
        self.exit_code = 1
        self.should_exit = True
