"""认证模块"""
import secrets
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import jwt
from fastapi import Depends, Request
from loguru import logger
from pydantic import BaseModel

from devcamper.core.config import settings
from devcamper.core.exceptions import ForbiddenException, NotAuthorizedException

TOKEN_COOKIE = "token"


class SigningKey:
    """JWT 签名密钥

    JWT_SECRET 未配置时使用 data/.jwt_secret，不存在则生成。
    """

    def __init__(self, key_file: Optional[Path] = None):
        self.key_file = Path(key_file or Path(settings.data_dir) / ".jwt_secret")
        self._generated: Optional[str] = None

    def get(self) -> str:
        if settings.JWT_SECRET:
            return settings.JWT_SECRET
        if self._generated is None:
            self._generated = self._load() or self._create()
        return self._generated

    def _load(self) -> Optional[str]:
        try:
            return self.key_file.read_text().strip() or None
        except FileNotFoundError:
            return None

    def _create(self) -> str:
        key = secrets.token_urlsafe(64)
        self.key_file.parent.mkdir(parents=True, exist_ok=True)
        self.key_file.write_text(key)
        self.key_file.chmod(0o600)
        logger.warning(f"JWT_SECRET 未配置，已生成本地签名密钥: {self.key_file}")
        return key


signing_key = SigningKey()


class TokenData(BaseModel):
    """令牌数据"""
    user_id: int
    exp: datetime


class JWTAuth:
    """JWT 认证处理器"""

    def __init__(self, key: SigningKey = signing_key):
        self.key = key

    def create_access_token(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
        return jwt.encode(
            {"id": user_id, "exp": expire},
            self.key.get(),
            algorithm=settings.JWT_ALGORITHM,
        )

    def verify_token(self, token: str) -> TokenData:
        try:
            payload = jwt.decode(token, self.key.get(), algorithms=[settings.JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise NotAuthorizedException("Token expired")
        except jwt.InvalidTokenError:
            raise NotAuthorizedException()

        user_id = payload.get("id")
        if not user_id:
            raise NotAuthorizedException()
        return TokenData(user_id=user_id, exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc))


jwt_auth = JWTAuth()


def _extract_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip() or None
    cookies = getattr(request.state, "cookies", None) or {}
    return cookies.get(TOKEN_COOKIE) or None


async def get_current_user(request: Request):
    """获取当前用户（Bearer 头或 token Cookie）"""
    from devcamper.services.users.user_service import user_service

    token = _extract_token(request)
    if not token:
        raise NotAuthorizedException()

    token_data = jwt_auth.verify_token(token)
    user = await user_service.get_user_by_id(token_data.user_id)
    if not user:
        raise NotAuthorizedException()
    return user


def authorize(*roles):
    """限定角色的依赖"""
    allowed = {getattr(role, "value", role) for role in roles}

    async def dependency(user=Depends(get_current_user)):
        if user.role.value not in allowed:
            raise ForbiddenException(f"User role {user.role.value} is not authorized to access this route")
        return user

    return dependency


def set_token_cookie(response, token: str, config=None):
    config = config or settings
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=config.JWT_COOKIE_EXPIRE * 24 * 60 * 60,
        httponly=True,
        secure=config.is_production,
    )


def clear_token_cookie(response):
    response.set_cookie(TOKEN_COOKIE, "none", max_age=10, httponly=True)
