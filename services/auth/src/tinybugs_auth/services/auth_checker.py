"""认证与授权检查。

职责:
1. 通过外部用户库查找账号并重新计算口令哈希比对。
2. 按 ID 重新确认身份。
3. 将角色判断委托给外部角色能力检查。

失败原因（用户不存在 / 口令错误）对调用方统一表现为 False；
用户库故障以 UserLookupError 向上抛出，不当作“用户不存在”。
"""

from __future__ import annotations

import binascii
from collections.abc import Callable
import hmac
from typing import Any
from uuid import UUID

from tinybugs_auth.core.logging import get_logger
from tinybugs_auth.models.enums import has_role
from tinybugs_auth.services.hashing import compute_password_hash_b64
from tinybugs_auth.services.user_store import StoredCredential, UserStore

logger = get_logger("auth_checker")

RoleCheck = Callable[[Any, str], bool]


def rank_role_check(user: Any, role: str) -> bool:
    """默认角色检查：优先使用用户自身的 is_in_role，否则按角色等级比较；未知角色一律拒绝。"""
    is_in_role = getattr(user, "is_in_role", None)
    if callable(is_in_role):
        return bool(is_in_role(role))
    return has_role(getattr(user, "role", None), role)


def passwords_match(user: StoredCredential, password: str | None) -> bool:
    """重新计算口令哈希并做常量时间比较。

    已存储的盐值或哈希无法解码时视为不匹配。
    """
    try:
        computed = compute_password_hash_b64(user.id, user.salt, password)
        expected = (user.password_hash or "").encode("ascii")
    except (ValueError, TypeError, binascii.Error):
        logger.warning("stored credential is malformed user_id=%s", user.id)
        return False
    return hmac.compare_digest(computed.encode("ascii"), expected)


class AuthChecker:
    """认证与授权编排，协作方通过构造参数注入。"""

    def __init__(self, store: UserStore, role_check: RoleCheck = rank_role_check) -> None:
        self._store = store
        self._role_check = role_check

    def authenticate_by_credentials(
        self, username: str | None, password: str | None
    ) -> tuple[bool, StoredCredential | None]:
        """按登录名与口令认证。

        口令错误时仍返回查到的用户，用户不存在时返回 None；
        对外只能暴露布尔结果（失败统一使用 `exceptions.UNAUTHORIZED`），不得据此区分失败原因。
        """
        normalized = username.lower() if username else ""
        user = self._store.find_by_username(normalized)
        if user is None:
            logger.info("authentication failed")
            return False, None

        ok = passwords_match(user, password)
        if not ok:
            logger.info("authentication failed")
        return ok, user

    def authenticate_by_id(self, user_id: UUID) -> tuple[bool, StoredCredential | None]:
        """按 ID 确认账号存在，不校验口令。"""
        user = self._store.find_by_id(user_id)
        return user is not None, user

    def authorize(self, user: Any, role: str) -> bool:
        """判断用户是否具备指定角色。"""
        return self._role_check(user, role)
