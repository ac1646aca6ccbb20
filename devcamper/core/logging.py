"""日志配置模块

loguru 输出到 stderr，可选写入滚动日志文件；所有记录经过脱敏过滤。
"""
import os
import re
import sys

from loguru import logger

from devcamper.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"

REDACTED = "***"

# (模式, 替换) 按顺序应用
REDACTIONS = [
    # JSON 或表单中的密码字段
    (re.compile(r'("?(?:password|current_password|new_password)"?\s*[:=]\s*)"[^"]*"', re.IGNORECASE),
     rf'\1"{REDACTED}"'),
    # 访问日志 URL 中的 token 查询参数
    (re.compile(r'([?&]token=)[^&\s]+', re.IGNORECASE), rf'\1{REDACTED}'),
    (re.compile(r'(Bearer\s+)[\w\-.]+', re.IGNORECASE), rf'\1{REDACTED}'),
    # 三段式 JWT
    (re.compile(r'eyJ[\w\-]+\.[\w\-]+\.[\w\-]+'), REDACTED),
    # bcrypt 哈希
    (re.compile(r'\$2[aby]?\$\d{2}\$[./A-Za-z0-9]{53}'), REDACTED),
    (re.compile(r'(\w+://[^:/\s]+):([^@\s]+)@'), rf'\1:{REDACTED}@'),
]


def redact(message: str) -> str:
    if not message:
        return message
    for pattern, replacement in REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


def _redacting_filter(record) -> bool:
    record["message"] = redact(record["message"])
    return True


def setup_logging(config=None) -> None:
    """初始化日志系统（重复调用会替换已有 handler）"""
    config = config or settings
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=config.LOG_LEVEL,
        colorize=True,
        filter=_redacting_filter,
    )

    if config.LOG_TO_FILE:
        os.makedirs(os.path.dirname(config.LOG_FILE_PATH), exist_ok=True)
        logger.add(
            config.LOG_FILE_PATH,
            format=FILE_FORMAT,
            level=config.LOG_LEVEL,
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            enqueue=True,
            filter=_redacting_filter,
        )

    logger.debug(f"日志初始化完成: level={config.LOG_LEVEL}, env={config.NODE_ENV}, file={config.LOG_TO_FILE}")
