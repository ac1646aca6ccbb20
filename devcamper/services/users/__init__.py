from devcamper.services.users.user_service import user_service

__all__ = ["user_service"]
