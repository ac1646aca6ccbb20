"""Application lifecycle management.

The database connection gates startup: the application only starts serving
once the connection has been established.
"""

import os
from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from loguru import logger

from devcamper.infrastructure.db import connect_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup initialization and shutdown cleanup.
    """
    config = app.state.settings

    logger.info("=" * 50)
    logger.info(f"初始化 {config.APP_NAME} v{config.APP_VERSION} ({config.NODE_ENV})")
    logger.info("=" * 50)

    async with AsyncExitStack() as stack:
        logger.info("[1/2] 连接数据库")
        try:
            await stack.enter_async_context(connect_db(app, config))
        except Exception as e:
            logger.error(f"应用启动失败: {e}")
            logger.error("请检查 config/config.env 中的 DATABASE_URL 以及数据库服务状态")
            raise

        logger.info("[2/2] 初始化上传目录")
        os.makedirs(config.upload_dir, exist_ok=True)

        try:
            yield
        finally:
            logger.info("正在关闭服务")

    logger.info("应用程序已停止")
