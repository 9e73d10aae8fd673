"""账号凭据核心：口令哈希、头像指纹、校验令牌与认证授权检查。"""

__version__ = "1.0.0"
