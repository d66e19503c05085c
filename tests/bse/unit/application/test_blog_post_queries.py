"""Unit tests for the blog post queries."""

from unittest.mock import AsyncMock

import pytest

from bse.application.queries import GetBlogPostQuery, ListBlogPostsQuery
from bse.domain.blog import BlogPostNotFoundError
from tests.shared.fixtures.factories import make_saved_post


class TestListBlogPostsQuery:
    def setup_method(self):
        self.blog_repo = AsyncMock()
        self.query = ListBlogPostsQuery(self.blog_repo)

    @pytest.mark.asyncio
    async def test_page_metadata(self):
        self.blog_repo.count.return_value = 25
        self.blog_repo.find_page.return_value = [
            make_saved_post(post_id=i) for i in range(19, 13, -1)
        ]

        result = await self.query.execute(page=2, page_size=6)

        self.blog_repo.find_page.assert_awaited_once_with(offset=6, limit=6)
        assert result.total_count == 25
        assert result.page == 2
        assert result.page_size == 6
        assert result.total_pages == 5
        assert result.has_next_page
        assert result.has_previous_page
        assert [p.id for p in result.items] == [19, 18, 17, 16, 15, 14]

    @pytest.mark.asyncio
    async def test_empty_listing(self):
        self.blog_repo.count.return_value = 0
        self.blog_repo.find_page.return_value = []

        result = await self.query.execute()

        assert result.items == ()
        assert result.page == 1
        assert result.page_size == 10
        assert result.total_pages == 0
        assert not result.has_next_page
        assert not result.has_previous_page

    @pytest.mark.asyncio
    async def test_page_past_the_end_skips_fetch(self):
        self.blog_repo.count.return_value = 3

        result = await self.query.execute(page=10**19, page_size=10)

        self.blog_repo.find_page.assert_not_awaited()
        assert result.items == ()
        assert result.page == 10**19
        assert result.total_pages == 1
        assert not result.has_next_page
        assert result.has_previous_page

    @pytest.mark.asyncio
    async def test_out_of_range_input_normalized(self):
        self.blog_repo.count.return_value = 3
        self.blog_repo.find_page.return_value = []

        result = await self.query.execute(page=0, page_size=1000)

        self.blog_repo.find_page.assert_awaited_once_with(offset=0, limit=100)
        assert result.page == 1
        assert result.page_size == 100

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self):
        self.blog_repo.count.return_value = 3
        self.blog_repo.find_page.return_value = []

        result = await self.query.execute(page=5, page_size=10)

        assert result.items == ()
        assert result.total_pages == 1
        assert not result.has_next_page
        assert result.has_previous_page


class TestGetBlogPostQuery:
    def setup_method(self):
        self.blog_repo = AsyncMock()
        self.query = GetBlogPostQuery(self.blog_repo)

    @pytest.mark.asyncio
    async def test_returns_author_projection(self):
        self.blog_repo.find_by_id.return_value = make_saved_post(
            post_id=2,
            author_name="Alice Author",
            image_urls=("/uploads/blog-images/a.png",),
        )

        result = await self.query.execute(2)

        assert result.id == 2
        assert result.author_name == "Alice Author"
        assert result.author_email == "author@example.com"
        assert result.images[0].image_url == "/uploads/blog-images/a.png"

    @pytest.mark.asyncio
    async def test_missing_post(self):
        self.blog_repo.find_by_id.return_value = None

        with pytest.raises(BlogPostNotFoundError):
            await self.query.execute(404)
