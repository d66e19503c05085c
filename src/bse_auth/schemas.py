"""Data classes shared by the auth services."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class TokenPayload:
    """Decoded claims of a verified access token."""

    user_id: int
    email: str
    full_name: str
    role: str
    exp: datetime

    @property
    def is_expired(self) -> bool:
        return datetime.now(tz=timezone.utc) >= self.exp


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed token together with its expiry instant."""

    token: str
    expires_at: datetime
