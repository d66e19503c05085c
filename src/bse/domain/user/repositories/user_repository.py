"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from bse.domain.user.aggregates.user import User
from bse.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by their ID.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address (case-insensitive).

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist a new user.

        Parameters
        ----------
        user
            The user to save

        Returns
        -------
        The stored user, with its assigned id

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """
