"""评价数据模式"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from devcamper.schemas.common import reject_null


class ReviewCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    text: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=10)
    bootcamp: int


class ReviewUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)
    text: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=10)

    @field_validator("title", "text", "rating")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class ReviewResponse(BaseModel):
    id: int
    title: str
    text: str
    rating: int
    bootcamp_id: int
    owner_id: int
    created_at: datetime

    class Config:
        from_attributes = True
