"""CurrentUser - the application's view of the authenticated caller.

Built by the presentation layer from verified token claims, so no
database lookup is needed to authorize a request.
"""

from dataclasses import dataclass

from bse.domain.user import Permission, UserRole, permissions_for


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user."""

    user_id: int
    email: str
    full_name: str = ""
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def permissions(self) -> frozenset[Permission]:
        return permissions_for(self.role)

    def __str__(self) -> str:
        return f"CurrentUser({self.email})"

    def __repr__(self) -> str:
        return (
            f"CurrentUser(user_id={self.user_id}, "
            f"email={self.email!r}, role={self.role.value})"
        )
