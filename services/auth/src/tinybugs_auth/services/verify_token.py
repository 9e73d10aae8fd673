"""邮箱校验令牌签发与校验。

令牌格式：32 位随机十六进制 + 12 位 UTC 签发时间（YYYYMMDDhhmm）。
令牌自描述，不落库；随机部分只保证不可猜测，校验时不检查。
"""

from __future__ import annotations

from datetime import datetime, timezone
import re

from tinybugs_auth.core.constants import (
    VERIFY_TOKEN_ISSUED_FORMAT,
    VERIFY_TOKEN_ISSUED_LENGTH,
    VERIFY_TOKEN_RANDOM_BYTES,
    VERIFY_TOKEN_TTL,
)
from tinybugs_auth.services.hashing import bytes_to_hex, random_bytes

# 校验失败时返回的签发时间占位值。
ISSUED_AT_UNSET = datetime.min.replace(tzinfo=timezone.utc)

_ISSUED_PATTERN = re.compile(r"[0-9]{12}")


def _utc_now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def issue_verify_token(now: datetime | None = None) -> str:
    """签发校验令牌。"""
    issued_at = _utc_now(now)
    return bytes_to_hex(random_bytes(VERIFY_TOKEN_RANDOM_BYTES)) + issued_at.strftime(VERIFY_TOKEN_ISSUED_FORMAT)


def parse_issued_at(token: str | None) -> datetime | None:
    """解析令牌末尾的签发时间，格式不合法时返回 None。"""
    if not token or len(token) < VERIFY_TOKEN_ISSUED_LENGTH:
        return None
    segment = token[-VERIFY_TOKEN_ISSUED_LENGTH:]
    # strptime 允许不补零的字段，先限定为 12 位数字。
    if not _ISSUED_PATTERN.fullmatch(segment):
        return None
    try:
        issued_at = datetime.strptime(segment, VERIFY_TOKEN_ISSUED_FORMAT)
    except ValueError:
        return None
    return issued_at.replace(tzinfo=timezone.utc)


def validate_verify_token(token: str | None, now: datetime | None = None) -> tuple[bool, datetime]:
    """校验令牌是否仍在有效期内。

    返回 `(是否有效, 签发时间)`。畸形令牌与过期令牌都返回 False，调用方不应区分二者。
    """
    issued_at = parse_issued_at(token)
    if issued_at is None:
        return False, ISSUED_AT_UNSET
    try:
        expires_at = issued_at + VERIFY_TOKEN_TTL
    except OverflowError:
        # 9999 年最后一小时的签发时间无法表示到期时间，按畸形令牌处理。
        return False, ISSUED_AT_UNSET
    return _utc_now(now) < expires_at, issued_at
