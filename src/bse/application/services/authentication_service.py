"""Authentication service for user sign-up and sign-in."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from bse.application.dtos import AuthResultDTO
from bse.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRole,
)
from bse_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)

if TYPE_CHECKING:
    from bse.application.factories import RepositoryFactory
    from bse.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Combines bse_auth (password hashing, JWT tokens) with the User domain:
    - Sign-up creates a user and issues a token
    - Sign-in checks the password digest and issues a token

    An unknown email and a wrong password produce the same
    InvalidCredentialsError so callers cannot probe for accounts.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ) -> AuthenticationService:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            jwt_service=jwt_service,
        )

    def _issue(self, user: User) -> AuthResultDTO:
        issued = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role.value,
        )
        return AuthResultDTO.from_user(user, issued)

    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: str,
        role: Union[str, UserRole] = UserRole.USER,
    ) -> AuthResultDTO:
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            role=role,
        )
        user = await self._user_repo.save(user)

        logger.info("User signed up: %s (role: %s)", user.email, user.role.value)
        return self._issue(user)

    async def sign_in(self, email: str, password: str) -> AuthResultDTO:
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            # No account can exist under an address that fails validation
            raise InvalidCredentialsError from None
        if user is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Failed sign-in attempt for: %s", user.email)
            raise InvalidCredentialsError

        logger.info("User signed in: %s", user.email)
        return self._issue(user)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
