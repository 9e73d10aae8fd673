"""新账号凭据生成服务。"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from uuid import UUID, uuid4

from tinybugs_auth.core.constants import SALT_LENGTH
from tinybugs_auth.services.hashing import compute_avatar_fingerprint, compute_password_hash, random_bytes


@dataclass(frozen=True)
class Credential:
    """新账号的凭据集合，由外部用户库负责落库。"""

    # 128 位随机 ID，参与口令哈希计算。
    id: UUID
    # 小写邮箱。
    email: str
    # 小写登录名。
    username: str
    # 头像指纹。
    avatar_fingerprint: str
    # base64 盐值。
    salt: str
    # base64 口令哈希。
    password_hash: str


def normalize_username(username: str | None, *, email: str) -> str:
    """登录名为空时回退为邮箱，统一小写。"""
    if not username:
        return email.lower()
    return username.lower()


def create_credential(email: str, password: str | None = None, username: str | None = None) -> Credential:
    """生成新账号凭据（不落库）。

    未提供口令时按空字符串计算哈希，是否允许此类账号登录由上层策略决定。
    """
    salt = random_bytes(SALT_LENGTH)
    user_id = uuid4()
    return Credential(
        id=user_id,
        email=email.lower(),
        username=normalize_username(username, email=email),
        avatar_fingerprint=compute_avatar_fingerprint(email),
        salt=base64.b64encode(salt).decode("ascii"),
        password_hash=base64.b64encode(compute_password_hash(user_id, salt, password)).decode("ascii"),
    )
