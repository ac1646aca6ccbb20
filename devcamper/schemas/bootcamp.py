"""训练营数据模式"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from devcamper.schemas.common import INT_MAX, reject_null

Career = Literal["Web Development", "Mobile Development", "UI/UX", "Data Science", "Business", "Other"]
URL_PATTERN = r"^https?://\S+$"


class BootcampCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1, max_length=500)
    website: str | None = Field(default=None, pattern=URL_PATTERN)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = None
    address: str | None = None
    careers: list[Career] = Field(default_factory=list)
    average_cost: int | None = Field(default=None, ge=0, le=INT_MAX)
    housing: bool = False
    job_assistance: bool = False
    job_guarantee: bool = False
    accept_gi: bool = False


class BootcampUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, min_length=1, max_length=500)
    website: str | None = Field(default=None, pattern=URL_PATTERN)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = None
    address: str | None = None
    careers: list[Career] | None = None
    average_cost: int | None = Field(default=None, ge=0, le=INT_MAX)
    housing: bool | None = None
    job_assistance: bool | None = None
    job_guarantee: bool | None = None
    accept_gi: bool | None = None

    @field_validator(
        "name", "description", "careers", "housing", "job_assistance", "job_guarantee", "accept_gi",
    )
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class BootcampResponse(BaseModel):
    id: int
    name: str
    slug: str
    description: str
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    careers: list[str] = Field(default_factory=list)
    average_rating: float | None = None
    average_cost: int | None = None
    photo: str
    housing: bool
    job_assistance: bool
    job_guarantee: bool
    accept_gi: bool
    owner_id: int
    created_at: datetime

    class Config:
        from_attributes = True
