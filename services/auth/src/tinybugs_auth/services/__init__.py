"""服务层能力导出集合。"""

from tinybugs_auth.services.auth_checker import AuthChecker, RoleCheck, passwords_match, rank_role_check
from tinybugs_auth.services.avatar import avatar_image_url, avatar_image_url_for_email
from tinybugs_auth.services.credentials import Credential, create_credential, normalize_username
from tinybugs_auth.services.hashing import (
    bytes_to_hex,
    compute_avatar_fingerprint,
    compute_password_hash,
    compute_password_hash_b64,
    random_bytes,
)
from tinybugs_auth.services.user_store import SqlUserStore, StoredCredential, UserStore
from tinybugs_auth.services.verify_token import (
    ISSUED_AT_UNSET,
    issue_verify_token,
    parse_issued_at,
    validate_verify_token,
)

__all__ = [
    "AuthChecker",
    "RoleCheck",
    "passwords_match",
    "rank_role_check",
    "avatar_image_url",
    "avatar_image_url_for_email",
    "Credential",
    "create_credential",
    "normalize_username",
    "bytes_to_hex",
    "compute_avatar_fingerprint",
    "compute_password_hash",
    "compute_password_hash_b64",
    "random_bytes",
    "SqlUserStore",
    "StoredCredential",
    "UserStore",
    "ISSUED_AT_UNSET",
    "issue_verify_token",
    "parse_issued_at",
    "validate_verify_token",
]
