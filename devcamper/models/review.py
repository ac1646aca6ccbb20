"""评价模型"""
from tortoise import fields

from devcamper.models.base import BaseModel


class Review(BaseModel):
    title = fields.CharField(max_length=100)
    text = fields.TextField()
    rating = fields.IntField()
    bootcamp = fields.ForeignKeyField("models.Bootcamp", related_name="reviews", on_delete=fields.CASCADE)
    owner = fields.ForeignKeyField("models.User", related_name="reviews")

    class Meta:
        table = "reviews"
        # 每个用户对同一训练营只能评价一次
        unique_together = (("bootcamp", "owner"),)

    def __str__(self):
        return self.title
