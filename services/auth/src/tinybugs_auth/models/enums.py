"""领域枚举定义。"""

from enum import StrEnum


class UserRole(StrEnum):
    """用户角色，按权限从低到高排列。"""

    USER = "user"  # 普通用户，可提交与评论缺陷。
    CONTRIBUTOR = "contributor"  # 贡献者，可处理分配给自己的缺陷。
    ADMIN = "admin"  # 管理员，具备全部权限。


ROLE_ORDER = {UserRole.USER: 0, UserRole.CONTRIBUTOR: 1, UserRole.ADMIN: 2}


def resolve_role(role: str | None) -> UserRole | None:
    """严格解析角色取值，未知角色返回 None。"""
    if not role:
        return None
    try:
        return UserRole(role.strip().lower())
    except ValueError:
        return None


def role_rank(role: str | None) -> int:
    """返回已存储角色的等级，未知角色按最低等级处理。"""
    resolved = resolve_role(role)
    return ROLE_ORDER[resolved] if resolved else 0


def has_role(current_role: str | None, required_role: str | None) -> bool:
    """判断当前角色是否不低于所需角色；所需角色未知时一律拒绝。"""
    required = resolve_role(required_role)
    if required is None:
        return False
    return role_rank(current_role) >= ROLE_ORDER[required]
