"""凭据兼容性常量。

注意：以下取值决定已落库口令哈希与已签发校验令牌的格式，
任何修改都会让历史数据失效，必须配套迁移方案，不能当作普通配置项调整。
"""

from datetime import timedelta

# 盐值字节数（base64 编码前）。
SALT_LENGTH = 16
# 口令预摘要算法：先对 id.hex + 口令 做一次摘要，再作为 PBKDF2 输入。
PASSWORD_PREHASH_ALGORITHM = "sha256"
# PBKDF2 伪随机函数（与历史实现保持一致，使用 HMAC-SHA1）。
PASSWORD_HASH_PRF = "sha1"
# PBKDF2 迭代次数。
PASSWORD_HASH_ITERATIONS = 20000
# 派生密钥长度（字节）。
PASSWORD_HASH_LENGTH = 64

# 校验令牌随机部分字节数（十六进制后为 32 个字符）。
VERIFY_TOKEN_RANDOM_BYTES = 16
# 校验令牌签发时间格式（UTC，精确到分钟，固定 12 位）。
VERIFY_TOKEN_ISSUED_FORMAT = "%Y%m%d%H%M"
VERIFY_TOKEN_ISSUED_LENGTH = 12
# 校验令牌有效期。
VERIFY_TOKEN_TTL = timedelta(minutes=60)
