"""数据库连接"""
import os
from contextlib import asynccontextmanager

from loguru import logger
from tortoise.contrib.fastapi import RegisterTortoise


class DatabaseConnectionError(RuntimeError):
    """数据库无法连接，应用不能启动"""


@asynccontextmanager
async def connect_db(app, config):
    """Connect the ORM for the lifetime of the block and create missing tables.

    Registration goes through tortoise's FastAPI integration, so the ORM
    context opened in the lifespan task is visible to every request task.
    Connections are closed when the block exits.

    Raises:
        DatabaseConnectionError: when the database cannot be reached.
    """
    if config.db_url.startswith("sqlite://") and ":memory:" not in config.db_url:
        os.makedirs(os.path.dirname(config.db_url[len("sqlite://"):]), exist_ok=True)

    connected = False
    try:
        async with RegisterTortoise(
            app,
            config=config.TORTOISE_ORM,
            generate_schemas=True,
            add_exception_handlers=False,
        ):
            connected = True
            logger.info(f"数据库已连接: {_safe_url(config.db_url)}")
            yield
    except (ConnectionError, OSError) as e:
        if connected:
            raise
        logger.error(f"无法连接数据库: {e}")
        raise DatabaseConnectionError(f"Database connection failed: {e}") from e

    logger.info("数据库连接已关闭")


def _safe_url(url: str) -> str:
    if "@" in url:
        scheme, _, rest = url.partition("://")
        return f"{scheme}://***@{rest.split('@')[-1]}"
    return url
