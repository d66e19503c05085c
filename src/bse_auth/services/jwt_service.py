"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone

import jwt

from bse_auth.exceptions import InvalidTokenError
from bse_auth.schemas import IssuedToken, TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry the user's id, email, display name and role, and are
    bound to a configured issuer and audience.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> issued = service.create_access_token(1, "user@example.com", "Jane", "User")
    >>> payload = service.verify_token(issued.token)
    >>> print(payload.user_id)
    1
    """

    DEFAULT_EXPIRE_DAYS = 7
    DEFAULT_ISSUER = "BSE"
    DEFAULT_AUDIENCE = "BSE-clients"
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        issuer: str = DEFAULT_ISSUER,
        audience: str = DEFAULT_AUDIENCE,
        expire_days: int = DEFAULT_EXPIRE_DAYS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        issuer
            Value of the ``iss`` claim, checked on verification
        audience
            Value of the ``aud`` claim, checked on verification
        expire_days
            Days until an access token expires (default 7)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expire = timedelta(days=expire_days)

    def create_access_token(
        self,
        user_id: int,
        email: str,
        full_name: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> IssuedToken:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's identifier
        email
            The user's email address
        full_name
            The user's display name
        role
            The user's role name
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        IssuedToken with the encoded JWT and its expiry instant
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "name": full_name,
            "role": role,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": expire,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        return IssuedToken(token=token, expires_at=expire)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, malformed, or was issued for a
            different issuer or audience
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["sub", "exp", "iat"]},
            )

            return TokenPayload(
                user_id=int(payload["sub"]),
                email=payload["email"],
                full_name=payload.get("name", ""),
                role=payload["role"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
