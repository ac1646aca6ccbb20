"""用户模型"""
from passlib.context import CryptContext
from tortoise import fields

from devcamper.models.base import BaseModel
from devcamper.models.enums import UserRole

pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt"],
    deprecated="auto",
)


class User(BaseModel):
    """用户模型"""

    name = fields.CharField(max_length=100)
    email = fields.CharField(max_length=255, unique=True)
    role = fields.CharEnumField(UserRole, default=UserRole.USER)
    password_hash = fields.CharField(max_length=128)

    class Meta:
        table = "users"

    def set_password(self, password):
        self.password_hash = pwd_context.hash(password)

    def verify_password(self, password):
        try:
            return pwd_context.verify(password, self.password_hash)
        except ValueError:
            return False

    def __str__(self):
        return self.email
