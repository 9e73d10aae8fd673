"""账号凭据服务运行配置。"""

from functools import lru_cache
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """凭据服务共享配置。

    口令哈希迭代次数、令牌格式等兼容性参数不在此处配置，见 `tinybugs_auth.core.constants`。
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TB_", extra="ignore")

    app_name: str = Field(default="TinyBugs Accounts", description="应用名称。")
    app_env: str = Field(default="dev", description="运行环境标识。")
    database_url: str = Field(
        default="sqlite+pysqlite:///./tinybugs.db",
        description="用户库连接地址。",
    )
    database_echo: bool = Field(default=False, description="是否输出 SQL 语句日志。")
    avatar_host: str = Field(default="www.gravatar.com", description="头像服务域名。")
    log_level: str = Field(default="INFO", description="日志级别。")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """规范化日志级别并确保取值合法。"""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("avatar_host")
    @classmethod
    def normalize_avatar_host(cls, value: str) -> str:
        """去掉协议前缀与末尾斜杠，仅保留域名。"""
        host = value.strip().removeprefix("https://").removeprefix("http://").rstrip("/")
        if not host:
            raise ValueError("avatar_host must not be empty")
        return host


@lru_cache
def get_settings() -> Settings:
    """返回缓存后的配置单例。"""
    return Settings()
