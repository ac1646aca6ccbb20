"""课程模型"""
from tortoise import fields

from devcamper.models.base import BaseModel
from devcamper.models.enums import SkillLevel


class Course(BaseModel):
    title = fields.CharField(max_length=100)
    description = fields.TextField()
    weeks = fields.IntField()
    tuition = fields.IntField()
    minimum_skill = fields.CharEnumField(SkillLevel)
    scholarship_available = fields.BooleanField(default=False)
    bootcamp = fields.ForeignKeyField("models.Bootcamp", related_name="courses", on_delete=fields.CASCADE)
    owner = fields.ForeignKeyField("models.User", related_name="courses")

    class Meta:
        table = "courses"

    def __str__(self):
        return self.title
