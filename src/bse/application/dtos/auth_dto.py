"""DTOs for authentication results."""

from dataclasses import dataclass
from datetime import datetime

from bse.domain.user import User, UserRole
from bse_auth import IssuedToken


@dataclass(frozen=True)
class AuthResultDTO:
    """Outcome of a successful sign-up or sign-in."""

    token: str
    user_id: int
    email: str
    full_name: str
    role: UserRole
    expires_at: datetime

    @classmethod
    def from_user(cls, user: User, issued: IssuedToken) -> "AuthResultDTO":
        if user.id is None:
            msg = "Cannot issue a token for an unsaved user"
            raise ValueError(msg)
        return cls(
            token=issued.token,
            user_id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            expires_at=issued.expires_at,
        )
