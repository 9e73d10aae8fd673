"""口令哈希与头像指纹计算。

所有函数均为纯函数，不持有状态，可在多线程中并发调用。
"""

from __future__ import annotations

import base64
import hashlib
import secrets
from uuid import UUID

from tinybugs_auth.core.constants import (
    PASSWORD_HASH_ITERATIONS,
    PASSWORD_HASH_LENGTH,
    PASSWORD_HASH_PRF,
    PASSWORD_PREHASH_ALGORITHM,
)
from tinybugs_auth.exceptions import RandomnessFailure

_HEX_ALPHABET = "0123456789abcdef"


def random_bytes(n: int) -> bytes:
    """从操作系统安全随机源读取 n 个字节。

    随机源不可用时抛出 RandomnessFailure，不回退到非密码学随机数。
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    try:
        return secrets.token_bytes(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessFailure() from exc


def bytes_to_hex(data: bytes) -> str:
    """按高半字节在前输出小写十六进制。"""
    chars: list[str] = []
    for b in data:
        chars.append(_HEX_ALPHABET[b >> 4])
        chars.append(_HEX_ALPHABET[b & 0xF])
    return "".join(chars)


def _as_uuid(value: UUID | str) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def compute_password_hash(user_id: UUID | str, salt: bytes, password: str | None) -> bytes:
    """计算口令派生密钥。

    1. 对 `user_id.hex + password` 的 UTF-8 字节做 SHA-256 预摘要；
    2. 以预摘要为口令、给定盐值执行 PBKDF2（HMAC-SHA1，20000 次），输出 64 字节。

    口令为空时按空字符串参与计算。
    """
    name_password = _as_uuid(user_id).hex + (password or "")
    prehash = hashlib.new(PASSWORD_PREHASH_ALGORITHM, name_password.encode("utf-8")).digest()
    return hashlib.pbkdf2_hmac(
        PASSWORD_HASH_PRF,
        prehash,
        salt,
        PASSWORD_HASH_ITERATIONS,
        dklen=PASSWORD_HASH_LENGTH,
    )


def compute_password_hash_b64(user_id: UUID | str, salt_b64: str, password: str | None) -> str:
    """使用落库的 base64 盐值计算口令哈希，返回落库格式（base64）。

    盐值不是合法 base64 时抛出 binascii.Error。
    """
    salt = base64.b64decode(salt_b64.encode("ascii"), validate=True)
    return base64.b64encode(compute_password_hash(user_id, salt, password)).decode("ascii")


def compute_avatar_fingerprint(email: str) -> str:
    """根据邮箱生成头像指纹（去空格 + 小写后做 MD5）。

    MD5 仅用于兼容第三方头像服务，不承担安全职责。
    """
    normalized = email.strip().lower()
    digest = hashlib.md5(normalized.encode("utf-8"), usedforsecurity=False).digest()
    return bytes_to_hex(digest)
