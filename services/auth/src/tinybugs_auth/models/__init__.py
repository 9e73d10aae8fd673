"""ORM 模型导出集合。"""

from tinybugs_auth.models.base import Base
from tinybugs_auth.models.enums import UserRole
from tinybugs_auth.models.user import User

__all__ = ["Base", "User", "UserRole"]
