"""通用响应模式"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar('T')


class BaseResponse(BaseModel, Generic[T]):
    success: bool = Field(default=True)
    code: int = Field(default=200)
    message: str = Field(default="")
    data: T | None = Field(default=None)
    timestamp: datetime = Field(default_factory=datetime.now)


class PaginationInfo(BaseModel):
    page: int
    limit: int
    total: int
    pages: int
    next: int | None = None
    prev: int | None = None


class PaginationResponse(BaseModel, Generic[T]):
    success: bool = Field(default=True)
    code: int = Field(default=200)
    message: str = Field(default="Query successful")
    count: int = 0
    data: list[T]
    pagination: PaginationInfo
    timestamp: datetime = Field(default_factory=datetime.now)


# 32 位整数列上限
INT_MAX = 2 ** 31 - 1


def reject_null(value):
    """更新时字段可以省略，但不能显式置为 null"""
    if value is None:
        raise ValueError("may not be null")
    return value
