"""Value objects for the user domain."""

from bse.domain.user.value_objects.email import Email
from bse.domain.user.value_objects.user_role import (
    ROLE_PERMISSIONS,
    Permission,
    UserRole,
    permissions_for,
)

__all__ = [
    "Email",
    "Permission",
    "ROLE_PERMISSIONS",
    "UserRole",
    "permissions_for",
]
