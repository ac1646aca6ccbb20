import sys

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from devcamper.bootstrap.server import APIServer
from devcamper.core.config import settings

STARTUP_FAILURE = 3


def main():
    # 配置日志格式
    LOGGING_CONFIG["formatters"]["default"]["fmt"] = "%(asctime)s %(levelprefix)s %(message)s"
    LOGGING_CONFIG["formatters"]["default"]["datefmt"] = "%Y-%m-%d %H:%M:%S"

    config = uvicorn.Config(
        "devcamper.asgi:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=LOGGING_CONFIG,
        access_log=False,
        server_header=False,
    )
    server = APIServer(config, node_env=settings.NODE_ENV)
    server.run()

    if not server.started:
        sys.exit(STARTUP_FAILURE)
    if server.exit_code:
        sys.exit(server.exit_code)


if __name__ == '__main__':
    main()
