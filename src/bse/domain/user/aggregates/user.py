from datetime import datetime
from typing import Optional, Union

from bse.domain.shared.exceptions import ValidationError
from bse.domain.shared.time import utc_now
from bse.domain.user.value_objects import Email, Permission, UserRole, permissions_for


class User:
    """
    User aggregate root.

    Holds identity, display name, role and the password digest. Users are
    immutable after sign-up. The id is assigned by the store on first save.
    """

    MAX_FULL_NAME_LENGTH = 100

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        full_name: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._full_name = full_name
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._id = id
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def permissions(self) -> frozenset[Permission]:
        return permissions_for(self._role)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        full_name: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
    ) -> "User":
        name = (full_name or "").strip()
        if not name:
            msg = "Full name is required"
            raise ValidationError(msg, details={"field": "fullName"})
        if len(name) > cls.MAX_FULL_NAME_LENGTH:
            msg = f"Full name cannot exceed {cls.MAX_FULL_NAME_LENGTH} characters"
            raise ValidationError(msg, details={"field": "fullName"})
        try:
            resolved_role = role if isinstance(role, UserRole) else UserRole(role)
        except ValueError as e:
            msg = "Role must be either 'User' or 'Admin'"
            raise ValidationError(msg, details={"field": "role"}) from e

        return cls(
            email=email,
            full_name=name,
            password_hash=password_hash,
            role=resolved_role,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        email: Union[str, Email],
        full_name: str,
        password_hash: str,
        role: Union[str, UserRole],
        created_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            role=role,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
