"""数据库会话管理。"""

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from tinybugs_auth.core.config import get_settings


@lru_cache
def get_engine() -> Engine:
    """按配置创建全局数据库引擎，开启连接预检查以减少僵尸连接影响。"""
    settings = get_settings()
    return create_engine(settings.database_url, echo=settings.database_echo, future=True, pool_pre_ping=True)


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    """返回统一会话工厂。"""
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, expire_on_commit=False, class_=Session)


@contextmanager
def session_scope(session_factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    """提供短生命周期会话，任何退出路径都会关闭连接。"""
    factory = session_factory or get_session_factory()
    db = factory()
    try:
        yield db
    finally:
        db.close()
