"""头像地址构造。"""

from tinybugs_auth.core.config import get_settings
from tinybugs_auth.services.hashing import compute_avatar_fingerprint


def avatar_image_url(fingerprint: str, secure: bool = False, size: int = 0) -> str:
    """根据头像指纹构造头像图片地址。"""
    settings = get_settings()
    protocol = "https" if secure else "http"
    size_query = f"&s={size}" if size > 0 else ""
    return f"{protocol}://{settings.avatar_host}/avatar/{fingerprint}?r=pg&d=mm{size_query}"


def avatar_image_url_for_email(email: str, secure: bool = False, size: int = 0) -> str:
    return avatar_image_url(compute_avatar_fingerprint(email), secure=secure, size=size)
