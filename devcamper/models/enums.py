"""模型枚举"""
from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    PUBLISHER = "publisher"
    ADMIN = "admin"


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
