from app.models.role import Role
from app.models.user import User, UserAuth, Mission

__all__ = ["Role", "User", "UserAuth", "Mission"]
