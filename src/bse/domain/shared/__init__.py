"""Shared domain components.

This module exports exceptions and utilities used across domain boundaries.
"""

from bse.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PermissionDeniedError,
    ValidationError,
)
from bse.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "PermissionDeniedError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
