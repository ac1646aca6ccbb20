"""数据模式"""

from devcamper.schemas.common import BaseResponse, PaginationInfo, PaginationResponse
from devcamper.schemas.bootcamp import BootcampCreateRequest, BootcampResponse, BootcampUpdateRequest
from devcamper.schemas.course import CourseCreateRequest, CourseResponse, CourseUpdateRequest
from devcamper.schemas.review import ReviewCreateRequest, ReviewResponse, ReviewUpdateRequest
from devcamper.schemas.user import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UpdateDetailsRequest,
    UpdatePasswordRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "BaseResponse",
    "PaginationInfo",
    "PaginationResponse",
    "BootcampCreateRequest",
    "BootcampResponse",
    "BootcampUpdateRequest",
    "CourseCreateRequest",
    "CourseResponse",
    "CourseUpdateRequest",
    "ReviewCreateRequest",
    "ReviewResponse",
    "ReviewUpdateRequest",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UpdateDetailsRequest",
    "UpdatePasswordRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
