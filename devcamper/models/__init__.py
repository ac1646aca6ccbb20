"""数据模型"""

from devcamper.models.enums import SkillLevel, UserRole
from devcamper.models.user import User
from devcamper.models.bootcamp import Bootcamp
from devcamper.models.course import Course
from devcamper.models.review import Review

__all__ = [
    "SkillLevel",
    "UserRole",
    "User",
    "Bootcamp",
    "Course",
    "Review",
]
