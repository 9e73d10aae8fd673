"""用户库访问接口与 SQL 实现。"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from tinybugs_auth.core.logging import get_logger
from tinybugs_auth.db.session import session_scope
from tinybugs_auth.exceptions import UserLookupError, UserStoreError
from tinybugs_auth.models.enums import UserRole
from tinybugs_auth.models.user import User
from tinybugs_auth.services.credentials import Credential

logger = get_logger("user_store")


class StoredCredential(Protocol):
    """认证所需的最小用户字段集合。"""

    id: UUID
    salt: str
    password_hash: str


class UserStore(Protocol):
    """用户查询协作方。未命中返回 None，查询故障抛出 UserLookupError。"""

    def find_by_username(self, username: str) -> StoredCredential | None: ...

    def find_by_id(self, user_id: UUID) -> StoredCredential | None: ...


class SqlUserStore:
    """基于 SQLAlchemy 的用户库，每次查询独立获取并释放会话。"""

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> User | None:
        """按小写登录名查询用户。"""
        return self._find_one(select(User).where(User.username == username))

    def find_by_id(self, user_id: UUID) -> User | None:
        """按 ID 查询用户。"""
        return self._find_one(select(User).where(User.id == user_id))

    def _find_one(self, query) -> User | None:
        try:
            with session_scope(self._session_factory) as db:
                user = db.execute(query).scalar_one_or_none()
                if user is not None:
                    db.expunge(user)
                return user
        except SQLAlchemyError as exc:
            logger.exception("user lookup failed")
            raise UserLookupError() from exc

    def add(self, credential: Credential, *, role: str = UserRole.USER) -> User:
        """将新账号凭据写入用户库。"""
        user = User(
            id=credential.id,
            email=credential.email,
            username=credential.username,
            avatar_fingerprint=credential.avatar_fingerprint,
            salt=credential.salt,
            password_hash=credential.password_hash,
            role=role,
        )
        try:
            with session_scope(self._session_factory) as db:
                try:
                    db.add(user)
                    db.commit()
                    db.refresh(user)
                    db.expunge(user)
                except SQLAlchemyError:
                    db.rollback()
                    raise
        except SQLAlchemyError as exc:
            logger.exception("user insert failed username=%s", credential.username)
            raise UserStoreError() from exc
        logger.info("user created id=%s username=%s", credential.id, credential.username)
        return user
