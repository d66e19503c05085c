"""Email value object.

Provides validated, normalized email addresses for user identification.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from bse.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    Syntax rules are those of ``email_validator``, the same checks the
    API schemas apply through pydantic's ``EmailStr``, so any address the
    API accepts is also a valid ``Email``. No DNS lookups are made.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = self.value.lower().strip()

        try:
            validate_email(normalized, check_deliverability=False)
        except EmailNotValidError as e:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg) from e

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
