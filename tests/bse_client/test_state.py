"""Tests for AuthSession and BlogFeed."""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from bse_client import ApiError, AuthSession, BlogFeed, BlogPage, BlogPost, BseApiClient
from bse_client.models import AuthResponseDto

AUTH_DTO = AuthResponseDto.model_validate(
    {
        "token": "tok-123",
        "email": "jane@example.com",
        "fullName": "Jane Doe",
        "role": "Admin",
        "expiresAt": "2030-01-01T00:00:00Z",
    }
)


def _page(page: int, total_pages: int, ids: list[int]) -> BlogPage:
    return BlogPage(
        items=tuple(
            BlogPost(
                id=i,
                title=f"Post {i}",
                content="Body",
                excerpt="Body",
                author_name="Jane Doe",
                author_email="jane@example.com",
            )
            for i in ids
        ),
        total_count=len(ids),
        page=page,
        page_size=6,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


class TestAuthSession:
    def setup_method(self):
        self.api = Mock(spec=BseApiClient)
        self.api.sign_in = AsyncMock(return_value=AUTH_DTO)
        self.api.sign_up = AsyncMock(return_value=AUTH_DTO)
        self.session = AuthSession(self.api)

    def test_starts_signed_out(self):
        assert not self.session.is_authenticated
        assert self.session.role == "User"
        assert not self.session.is_admin

    @pytest.mark.asyncio
    async def test_sign_in_stores_user_and_token(self):
        user = await self.session.sign_in("jane@example.com", "secret123")

        assert user is not None
        assert self.session.is_authenticated
        assert self.session.is_admin
        assert self.session.current_user.full_name == "Jane Doe"
        assert self.api.token == "tok-123"
        assert not self.session.is_loading
        assert self.session.error_message is None

    @pytest.mark.asyncio
    async def test_sign_up_signs_in(self):
        user = await self.session.sign_up("jane@example.com", "secret123", "Jane Doe")

        assert user.email == "jane@example.com"
        assert self.session.is_authenticated

    @pytest.mark.asyncio
    async def test_failed_sign_in_shows_server_message(self):
        self.api.sign_in.side_effect = ApiError(401, "Invalid email or password")

        user = await self.session.sign_in("jane@example.com", "wrong")

        assert user is None
        assert not self.session.is_authenticated
        assert self.session.error_message == "Invalid email or password"
        assert not self.session.is_loading

    @pytest.mark.asyncio
    async def test_network_failure_uses_generic_message(self):
        self.api.sign_in.side_effect = httpx.ConnectError("refused")

        await self.session.sign_in("jane@example.com", "secret123")

        assert self.session.error_message == "Sign in failed. Please try again."

    @pytest.mark.asyncio
    async def test_sign_out_clears_token(self):
        await self.session.sign_in("jane@example.com", "secret123")

        self.session.sign_out()

        assert not self.session.is_authenticated
        assert self.api.token is None


class TestBlogFeed:
    def setup_method(self):
        self.api = Mock(spec=BseApiClient)
        self.api.list_blogs = AsyncMock()
        self.feed = BlogFeed(self.api)

    @pytest.mark.asyncio
    async def test_load_first_page(self):
        self.api.list_blogs.return_value = _page(1, 3, [9, 8, 7])

        await self.feed.load()

        self.api.list_blogs.assert_awaited_once_with(1, 6)
        assert [p.id for p in self.feed.posts] == [9, 8, 7]
        assert self.feed.has_next_page
        assert not self.feed.has_previous_page
        assert not self.feed.is_loading

    @pytest.mark.asyncio
    async def test_next_and_previous(self):
        self.api.list_blogs.return_value = _page(1, 2, [4, 3])
        await self.feed.load()

        self.api.list_blogs.return_value = _page(2, 2, [2, 1])
        await self.feed.next_page()
        assert self.feed.current_page == 2
        assert not self.feed.has_next_page

        # No page 3: nothing is fetched
        await self.feed.next_page()
        assert self.api.list_blogs.await_count == 2

        self.api.list_blogs.return_value = _page(1, 2, [4, 3])
        await self.feed.previous_page()
        assert self.feed.current_page == 1

    @pytest.mark.asyncio
    async def test_page_moves_keep_the_loaded_page_size(self):
        self.api.list_blogs.return_value = _page(1, 3, [9, 8, 7])
        await self.feed.load(page_size=25)

        await self.feed.next_page()

        self.api.list_blogs.assert_awaited_with(2, 25)

    @pytest.mark.asyncio
    async def test_previous_on_first_page_is_noop(self):
        await self.feed.previous_page()

        self.api.list_blogs.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_keeps_posts_and_sets_error(self):
        self.api.list_blogs.return_value = _page(1, 2, [4, 3])
        await self.feed.load()

        self.api.list_blogs.side_effect = ApiError(500, "An unexpected error occurred")
        await self.feed.load(2)

        assert self.feed.error == "An unexpected error occurred"
        assert [p.id for p in self.feed.posts] == [4, 3]
        assert self.feed.current_page == 1
        assert not self.feed.is_loading
