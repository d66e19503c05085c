"""User roles and the capabilities they grant."""

from enum import Enum
from typing import Union


class UserRole(str, Enum):
    USER = "User"
    ADMIN = "Admin"


class Permission(str, Enum):
    """Capabilities checked by domain authorization rules."""

    MANAGE_OWN_BLOG_POST = "blog_post:manage_own"
    MANAGE_ANY_BLOG_POST = "blog_post:manage_any"


ROLE_PERMISSIONS: dict[UserRole, frozenset[Permission]] = {
    UserRole.USER: frozenset({Permission.MANAGE_OWN_BLOG_POST}),
    UserRole.ADMIN: frozenset(
        {
            Permission.MANAGE_OWN_BLOG_POST,
            Permission.MANAGE_ANY_BLOG_POST,
        }
    ),
}


def permissions_for(role: Union[str, UserRole]) -> frozenset[Permission]:
    """Return the capability set of a role.

    Unknown role names grant nothing.
    """
    try:
        resolved = role if isinstance(role, UserRole) else UserRole(role)
    except ValueError:
        return frozenset()
    return ROLE_PERMISSIONS[resolved]
