"""Presentation state holders for the client application.

``AuthSession`` tracks who is signed in; ``BlogFeed`` tracks the blog
listing the user is paging through. Neither holds business rules: the
server decides everything, these only remember the last answer.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from bse_client.api_client import DEFAULT_PAGE_SIZE, BseApiClient
from bse_client.exceptions import ApiError
from bse_client.models import BlogPost, User

logger = logging.getLogger(__name__)

SIGN_IN_FAILED_MESSAGE = "Sign in failed. Please try again."
LOAD_BLOGS_FAILED_MESSAGE = "Failed to load blogs"


class AuthSession:
    """Current user plus the loading/error flags of the auth forms."""

    def __init__(self, api: BseApiClient):
        self._api = api
        self.current_user: Optional[User] = None
        self.is_loading = False
        self.error_message: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def role(self) -> str:
        return self.current_user.role if self.current_user else "User"

    @property
    def is_admin(self) -> bool:
        return self.role == "Admin"

    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: str,
        role: str = "User",
    ) -> Optional[User]:
        """Create an account and sign in; on failure set ``error_message``."""
        self.is_loading = True
        self.error_message = None
        try:
            dto = await self._api.sign_up(email, password, full_name, role)
        except (ApiError, httpx.HTTPError) as e:
            self._fail(e)
            return None
        return self._signed_in(User.from_dto(dto))

    async def sign_in(self, email: str, password: str) -> Optional[User]:
        """Sign in; on failure set ``error_message``."""
        self.is_loading = True
        self.error_message = None
        try:
            dto = await self._api.sign_in(email, password)
        except (ApiError, httpx.HTTPError) as e:
            self._fail(e)
            return None
        return self._signed_in(User.from_dto(dto))

    def sign_out(self) -> None:
        self.current_user = None
        self.error_message = None
        self._api.token = None

    def _signed_in(self, user: User) -> User:
        self.current_user = user
        self._api.token = user.token
        self.is_loading = False
        return user

    def _fail(self, error: Exception) -> None:
        message = error.message if isinstance(error, ApiError) else None
        self.error_message = message or SIGN_IN_FAILED_MESSAGE
        self.is_loading = False
        logger.info("Authentication failed: %s", self.error_message)


class BlogFeed:
    """Paged blog listing state."""

    def __init__(self, api: BseApiClient, page_size: int = DEFAULT_PAGE_SIZE):
        self._api = api
        self._page_size = page_size
        self.posts: list[BlogPost] = []
        self.current_page = 1
        self.total_pages = 1
        self.is_loading = False
        self.error: Optional[str] = None

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    async def load(self, page: int = 1, page_size: Optional[int] = None) -> None:
        """Fetch a page; on failure keep the old posts and set ``error``.

        A ``page_size`` given here is kept for later page moves.
        """
        if page_size:
            self._page_size = page_size
        self.is_loading = True
        self.error = None
        try:
            result = await self._api.list_blogs(page, self._page_size)
        except (ApiError, httpx.HTTPError) as e:
            message = e.message if isinstance(e, ApiError) else str(e)
            self.error = message or LOAD_BLOGS_FAILED_MESSAGE
            self.is_loading = False
            return

        self.posts = list(result.items)
        self.current_page = result.page
        self.total_pages = result.total_pages
        self.is_loading = False

    async def next_page(self) -> None:
        if self.has_next_page:
            await self.load(self.current_page + 1)

    async def previous_page(self) -> None:
        if self.has_previous_page:
            await self.load(self.current_page - 1)
