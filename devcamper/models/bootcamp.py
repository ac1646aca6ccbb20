"""训练营模型"""
import re

from tortoise import fields

from devcamper.models.base import BaseModel


def slugify(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


class Bootcamp(BaseModel):
    name = fields.CharField(max_length=50, unique=True)
    slug = fields.CharField(max_length=60, db_index=True)
    description = fields.CharField(max_length=500)
    website = fields.CharField(max_length=255, null=True)
    phone = fields.CharField(max_length=20, null=True)
    email = fields.CharField(max_length=255, null=True)
    address = fields.CharField(max_length=255, null=True)
    careers = fields.JSONField(default=list)
    average_rating = fields.FloatField(null=True)
    average_cost = fields.IntField(null=True)
    photo = fields.CharField(max_length=255, default="no-photo.jpg")
    housing = fields.BooleanField(default=False)
    job_assistance = fields.BooleanField(default=False)
    job_guarantee = fields.BooleanField(default=False)
    accept_gi = fields.BooleanField(default=False)
    owner = fields.ForeignKeyField("models.User", related_name="bootcamps")

    class Meta:
        table = "bootcamps"

    async def save(self, *args, **kwargs):
        self.slug = slugify(self.name)
        await super().save(*args, **kwargs)

    def __str__(self):
        return self.name
