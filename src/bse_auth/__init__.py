"""BSE Auth - Generic authentication infrastructure.

This package provides authentication primitives that are independent
of the blog domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    bse_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from bse_auth import PasswordHashingService, JWTService
"""

from bse_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from bse_auth.schemas import IssuedToken, TokenPayload
from bse_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "IssuedToken",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
