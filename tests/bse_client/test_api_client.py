"""Tests for BseApiClient against a mocked transport."""

import json

import httpx
import pytest

from bse_client import ApiError, BseApiClient, ImageUpload

BACKEND = "http://api.test"

AUTH_BODY = {
    "token": "tok-123",
    "email": "jane@example.com",
    "fullName": "Jane Doe",
    "role": "User",
    "expiresAt": "2030-01-01T00:00:00Z",
}


def _blog_body(blog_id: int = 1, content: str = "Body") -> dict:
    return {
        "id": blog_id,
        "title": "Hello",
        "content": content,
        "authorId": 3,
        "authorName": "Jane Doe",
        "authorEmail": "jane@example.com",
        "createdAt": "2024-05-01T12:00:00Z",
        "updatedAt": "2024-05-01T12:00:00Z",
        "images": [{"id": 8, "imageUrl": "/uploads/blog-images/a.png"}],
    }


class Recorder:
    """Transport handler that records requests and replays canned responses."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(recorder: Recorder, token: str | None = None) -> BseApiClient:
    return BseApiClient(
        BACKEND,
        token=token,
        transport=httpx.MockTransport(recorder),
    )


class TestAuthCalls:
    @pytest.mark.asyncio
    async def test_sign_up_posts_camel_case_body(self):
        recorder = Recorder(httpx.Response(201, json=AUTH_BODY))

        async with _client(recorder) as api:
            result = await api.sign_up("jane@example.com", "secret123", "Jane Doe")

        assert recorder.last.url == f"{BACKEND}/api/auth/signup"
        assert json.loads(recorder.last.content) == {
            "email": "jane@example.com",
            "password": "secret123",
            "fullName": "Jane Doe",
            "role": "User",
        }
        assert result.token == "tok-123"
        assert result.full_name == "Jane Doe"

    @pytest.mark.asyncio
    async def test_auth_calls_never_send_token(self):
        recorder = Recorder(httpx.Response(200, json=AUTH_BODY))

        async with _client(recorder, token="old-token") as api:
            await api.sign_in("jane@example.com", "secret123")

        assert "authorization" not in recorder.last.headers

    @pytest.mark.asyncio
    async def test_error_body_becomes_api_error(self):
        recorder = Recorder(
            httpx.Response(
                401,
                json={"message": "Invalid email or password", "statusCode": 401},
            )
        )

        async with _client(recorder) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.sign_in("jane@example.com", "wrong")

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_validation_errors_kept(self):
        recorder = Recorder(
            httpx.Response(
                400,
                json={
                    "message": "One or more validation errors occurred.",
                    "statusCode": 400,
                    "errors": {"password": ["too short"]},
                },
            )
        )

        async with _client(recorder) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.sign_up("jane@example.com", "abc", "Jane")

        assert exc_info.value.errors == {"password": ["too short"]}

    @pytest.mark.asyncio
    async def test_non_json_error_uses_reason_phrase(self):
        recorder = Recorder(httpx.Response(502, text="<html>bad gateway</html>"))

        async with _client(recorder) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.sign_in("jane@example.com", "secret123")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"


class TestBlogCalls:
    @pytest.mark.asyncio
    async def test_list_blogs_sends_paging_and_token(self):
        recorder = Recorder(
            httpx.Response(
                200,
                json={
                    "items": [_blog_body(1), _blog_body(2)],
                    "totalCount": 8,
                    "page": 1,
                    "pageSize": 6,
                    "totalPages": 2,
                    "hasNextPage": True,
                    "hasPreviousPage": False,
                },
            )
        )

        async with _client(recorder, token="tok-123") as api:
            page = await api.list_blogs()

        request = recorder.last
        assert request.url.path == "/api/blogs"
        assert request.url.params["page"] == "1"
        assert request.url.params["pageSize"] == "6"
        assert request.headers["authorization"] == "Bearer tok-123"
        assert page.total_pages == 2
        assert page.has_next_page
        assert [p.id for p in page.items] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_blog_builds_absolute_image_urls(self):
        recorder = Recorder(httpx.Response(200, json=_blog_body(5)))

        async with _client(recorder) as api:
            post = await api.get_blog(5)

        assert recorder.last.url.path == "/api/blogs/5"
        assert post.images[0].url == f"{BACKEND}/uploads/blog-images/a.png"
        assert post.images[0].id == "8"
        assert post.images[0].alt_text == "Hello"

    @pytest.mark.asyncio
    async def test_create_blog_sends_multipart(self):
        recorder = Recorder(httpx.Response(201, json=_blog_body()))

        async with _client(recorder, token="tok-123") as api:
            await api.create_blog(
                "Hello",
                "Body",
                images=[ImageUpload("a.png", b"png-bytes", "image/png")],
            )

        request = recorder.last
        assert request.method == "POST"
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.content
        assert b'name="title"' in body
        assert b'name="images"; filename="a.png"' in body
        assert b"png-bytes" in body

    @pytest.mark.asyncio
    async def test_update_blog_uses_new_images_field(self):
        recorder = Recorder(httpx.Response(200, json=_blog_body(5)))

        async with _client(recorder, token="tok-123") as api:
            await api.update_blog(
                5,
                "Hello",
                "Body",
                new_images=[ImageUpload("b.png", b"more", "image/png")],
            )

        request = recorder.last
        assert request.method == "PUT"
        assert request.url.path == "/api/blogs/5"
        assert b'name="newImages"; filename="b.png"' in request.content

    @pytest.mark.asyncio
    async def test_delete_blog(self):
        recorder = Recorder(httpx.Response(204))

        async with _client(recorder, token="tok-123") as api:
            await api.delete_blog(5)

        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/blogs/5"

    @pytest.mark.asyncio
    async def test_forbidden_delete_raises(self):
        recorder = Recorder(
            httpx.Response(
                403,
                json={
                    "message": "You don't have permission to delete this blog",
                    "statusCode": 403,
                },
            )
        )

        async with _client(recorder, token="tok-123") as api:
            with pytest.raises(ApiError, match="permission to delete"):
                await api.delete_blog(5)
