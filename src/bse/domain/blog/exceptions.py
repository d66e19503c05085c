"""Blog domain exceptions."""

from bse.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    PermissionDeniedError,
    ValidationError,
)


class BlogPostNotFoundError(EntityNotFoundError):
    def __init__(self, post_id: int) -> None:
        self.post_id = post_id
        super().__init__(
            f"Blog with ID {post_id} not found",
            code=ErrorCode.BLOG_POST_NOT_FOUND,
            details={"post_id": post_id},
        )


class BlogPostPermissionError(PermissionDeniedError):
    """Raised when a user tries to change a post they neither own nor administer."""

    def __init__(self, post_id: int, action: str, user_id: int | None = None) -> None:
        self.post_id = post_id
        self.action = action
        super().__init__(
            f"You don't have permission to {action} this blog",
            details={"post_id": post_id, "user_id": user_id, "action": action},
        )


class InvalidFileError(ValidationError):
    """Raised when an uploaded image is empty, too large or of a disallowed type."""

    def __init__(self, message: str, filename: str | None = None) -> None:
        self.filename = filename
        super().__init__(
            message,
            code=ErrorCode.INVALID_FILE,
            details={"filename": filename},
        )
