"""Client-side errors."""

from typing import Optional


class ApiError(Exception):
    """Raised when the API answers with a non-success status.

    Attributes
    ----------
    status_code
        HTTP status of the response
    message
        The ``message`` field of the error body, or a generic text
    errors
        Per-field validation messages, when the server sent them
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Optional[dict[str, list[str]]] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}
        super().__init__(f"{status_code}: {message}")
