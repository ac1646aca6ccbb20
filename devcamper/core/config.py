import os

from pydantic import Field
from pydantic_settings import BaseSettings

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))


class Settings(BaseSettings):
    """应用配置"""

    NODE_ENV: str = Field(default="production")
    PORT: int
    HOST: str = Field(default="0.0.0.0")

    APP_NAME: str = "DevCamper API"
    APP_DESCRIPTION: str = "Bootcamp directory REST API"
    APP_VERSION: str = "1.0.0"

    LOG_LEVEL: str = Field(default="INFO")
    LOG_TO_FILE: bool = Field(default=False)

    # 留空使用默认 SQLite
    DATABASE_URL: str = Field(default="")

    JWT_SECRET: str = Field(default="")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 30 * 24 * 60
    JWT_COOKIE_EXPIRE: int = 30

    PUBLIC_DIR: str = Field(default="public")
    FILE_UPLOAD_PATH: str = Field(default=os.path.join("public", "uploads"))
    MAX_FILE_UPLOAD: int = 1_000_000
    BODY_LIMIT: int = 100 * 1024

    RATE_LIMIT_WINDOW_MS: int = 10 * 60 * 1000
    RATE_LIMIT_MAX: int = 100

    CORS_ALLOW_METHODS: list = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]

    BASE_DIR: str = BASE_DIR

    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == "development"

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    @property
    def data_dir(self):
        """数据目录：所有生成文件的根目录"""
        return os.path.join(self.BASE_DIR, "data")

    @property
    def public_dir(self):
        return self._resolve(self.PUBLIC_DIR)

    @property
    def upload_dir(self):
        return self._resolve(self.FILE_UPLOAD_PATH)

    @property
    def LOG_FILE_PATH(self):
        return os.path.join(self.data_dir, "logs", "app.log")

    @property
    def db_url(self):
        """实际使用的数据库 URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite://{os.path.join(self.data_dir, 'db', 'devcamper.sqlite3')}"

    @property
    def TORTOISE_ORM(self):
        return {
            "connections": {"default": self.db_url},
            "apps": {
                "models": {
                    "models": ["devcamper.models"],
                    "default_connection": "default",
                },
            },
            "use_tz": True,
            "timezone": "UTC",
        }

    def _resolve(self, path):
        if os.path.isabs(path):
            return path
        return os.path.join(self.BASE_DIR, path)

    class Config:
        env_file = os.path.join(BASE_DIR, "config", "config.env")
        case_sensitive = True
        extra = "ignore"


settings = Settings()
