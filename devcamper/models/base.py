"""基础模型"""
from tortoise import fields
from tortoise.models import Model


class BaseModel(Model):
    """自增主键 + 创建时间"""

    id = fields.IntField(primary_key=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        abstract = True
