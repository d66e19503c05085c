"""User domain - identity, credentials and roles.

Design notes:
- User ID is an integer assigned by the store on first save
- Email is normalized (trimmed, lower-cased) and unique
- Role grants a capability set used by authorization rules
- Repository interface defined here, implementation in infrastructure
"""

from bse.domain.user.aggregates import User
from bse.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from bse.domain.user.repositories import UserRepository
from bse.domain.user.value_objects import (
    Email,
    Permission,
    UserRole,
    permissions_for,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "Permission",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "permissions_for",
]
