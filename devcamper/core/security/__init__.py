"""认证与授权"""

from devcamper.core.security.auth import (
    authorize,
    clear_token_cookie,
    get_current_user,
    jwt_auth,
    set_token_cookie,
)

__all__ = ["authorize", "clear_token_cookie", "get_current_user", "jwt_auth", "set_token_cookie"]
