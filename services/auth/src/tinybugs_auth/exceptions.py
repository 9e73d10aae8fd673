"""凭据服务异常定义与协议异常映射。

用户不存在、口令错误、令牌畸形或过期都不是异常，统一以布尔结果返回；
这里只定义“操作无法完成”类故障。
"""

from fastapi import HTTPException, status

# 供宿主接口层在认证或令牌校验返回 False 时抛出；所有失败共用同一个 401，不区分原因。
UNAUTHORIZED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="unauthorized",
)


class CredentialError(Exception):
    """凭据服务异常基类。"""

    code = "CREDENTIAL_ERROR"
    message = "凭据处理失败。"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
        super().__init__(self.message)


class RandomnessFailure(CredentialError):
    """安全随机源不可用，必须中止当前操作。"""

    code = "RANDOMNESS_UNAVAILABLE"
    message = "安全随机源不可用。"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class UserStoreError(CredentialError):
    """用户库读写失败。"""

    code = "USER_STORE_ERROR"
    message = "用户库访问失败。"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class UserLookupError(UserStoreError):
    """用户查询失败（区别于“用户不存在”），认证无法完成。"""

    code = "AUTH_LOOKUP_FAILED"
    message = "认证未能完成：用户查询失败。"


def to_http_exception(exc: CredentialError) -> HTTPException:
    """将领域异常包装为标准错误结构的协议异常。"""
    return HTTPException(
        status_code=exc.status_code,
        detail={
            "code": exc.code,
            "message": exc.message,
            "details": {"reason": exc.code.lower()},
        },
    )
