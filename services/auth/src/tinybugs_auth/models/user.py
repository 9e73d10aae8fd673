"""用户账号模型。"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tinybugs_auth.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from tinybugs_auth.models.enums import UserRole, has_role


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """本地账号，保存口令凭据与头像指纹。"""

    __tablename__ = "users"

    # 小写后的邮箱。
    email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    # 小写后的登录名，缺省与邮箱相同。
    username: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    # 头像指纹（32 位小写十六进制），非机密。
    avatar_fingerprint: Mapped[str] = mapped_column(String(32), nullable=False)
    # base64 盐值，创建后不可变更。
    salt: Mapped[str] = mapped_column(String(32), nullable=False)
    # base64 口令哈希，不存明文。
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    # 用户角色（user/contributor/admin）。
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=UserRole.USER)

    def is_in_role(self, role: str) -> bool:
        """判断用户角色是否不低于指定角色，未知角色返回 False。"""
        return has_role(self.role, role)
