"""用户服务"""
from loguru import logger
from tortoise.exceptions import IntegrityError

from devcamper.core.exceptions import BadRequestException, NotAuthorizedException, ResourceNotFoundException
from devcamper.models.enums import UserRole
from devcamper.models.user import User


class UserService:
    """用户服务"""

    async def authenticate_user(self, email, password):
        user = await User.get_or_none(email=email.lower())
        if not user:
            logger.debug(f"用户不存在: {email}")
            return None

        if not user.verify_password(password):
            logger.debug(f"密码验证失败: {email}")
            return None
        return user

    async def create_user(self, name, email, password, role):
        email = email.lower()
        if await User.exists(email=email):
            raise IntegrityError("邮箱已存在")

        user = User(name=name, email=email, role=UserRole(role))
        user.set_password(password)
        await user.save()

        logger.info(f"用户已创建: {user.email} ({user.role.value})")
        return user

    async def get_user_by_id(self, user_id):
        return await User.get_or_none(id=user_id)

    async def get_user_or_404(self, user_id):
        user = await User.get_or_none(id=user_id)
        if not user:
            raise ResourceNotFoundException("User", user_id)
        return user

    async def update_user(self, user, changes: dict):
        if "email" in changes and changes["email"]:
            changes["email"] = changes["email"].lower()
            if await User.filter(email=changes["email"]).exclude(id=user.id).exists():
                raise IntegrityError("邮箱已存在")

        if changes:
            user.update_from_dict(changes)
            await user.save()
            logger.info(f"用户已更新: {user.id} {sorted(changes)}")
        return user

    async def change_password(self, user, current_password, new_password):
        if not user.verify_password(current_password):
            raise NotAuthorizedException("Password is incorrect")
        if current_password == new_password:
            raise BadRequestException("New password must differ from the current one")

        user.set_password(new_password)
        await user.save()
        logger.info(f"用户密码已修改: {user.id}")
        return user

    async def delete_user(self, user_id):
        user = await self.get_user_or_404(user_id)
        await user.delete()
        logger.info(f"用户已删除: {user_id}")


user_service = UserService()
