"""Author projection attached to a blog post when it is loaded."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """Read-only view of the owning user, joined at read time."""

    id: int
    name: str
    email: str
