"""课程数据模式"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from devcamper.models.enums import SkillLevel
from devcamper.schemas.common import INT_MAX, reject_null


class CourseCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    weeks: int = Field(..., ge=1, le=INT_MAX)
    tuition: int = Field(..., ge=0, le=INT_MAX)
    minimum_skill: SkillLevel
    scholarship_available: bool = False
    bootcamp: int


class CourseUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, min_length=1)
    weeks: int | None = Field(default=None, ge=1, le=INT_MAX)
    tuition: int | None = Field(default=None, ge=0, le=INT_MAX)
    minimum_skill: SkillLevel | None = None
    scholarship_available: bool | None = None

    @field_validator("title", "description", "weeks", "tuition", "minimum_skill", "scholarship_available")
    @classmethod
    def validate_not_null(cls, v):
        """课程字段均不可为空"""
        return reject_null(v)


class CourseResponse(BaseModel):
    id: int
    title: str
    description: str
    weeks: int
    tuition: int
    minimum_skill: SkillLevel
    scholarship_available: bool
    bootcamp_id: int
    owner_id: int
    created_at: datetime

    class Config:
        from_attributes = True
