"""Async HTTP client for the BSE API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from bse_client.exceptions import ApiError
from bse_client.models import (
    AuthResponseDto,
    BlogPage,
    BlogPost,
    BlogResponseDto,
    PaginatedBlogsDto,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 6


@dataclass(frozen=True)
class ImageUpload:
    """An image file to send with a create or update request."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class BseApiClient:
    """HTTP client wrapper for the BSE API.

    Holds an optional bearer token and attaches it to every request
    except those under ``/auth/``.

    Parameters
    ----------
    backend_url
        Server origin, e.g. ``http://localhost:8000``; also used to turn
        root-relative image URLs into absolute ones
    api_prefix
        Path prefix of the API routes
    token
        Bearer token to start with
    transport
        Custom httpx transport (tests use ``httpx.MockTransport``)
    """

    def __init__(
        self,
        backend_url: str,
        api_prefix: str = "/api",
        token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._backend_url = backend_url.rstrip("/")
        self._api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def backend_url(self) -> str:
        return self._backend_url

    @property
    def token(self) -> Optional[str]:
        return self._token

    @token.setter
    def token(self, value: Optional[str]) -> None:
        self._token = value

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{self._backend_url}{self._api_prefix}",
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> BseApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _headers_for(self, path: str) -> dict[str, str]:
        if not self._token or path.startswith("/auth/"):
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        response = await client.request(
            method,
            path,
            headers=self._headers_for(path),
            **kwargs,
        )
        if response.is_success:
            return response

        message = response.reason_phrase or "Request failed"
        errors = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or message
            errors = body.get("errors")

        logger.warning(
            "API %s %s returned %d: %s",
            method,
            path,
            response.status_code,
            message,
        )
        raise ApiError(response.status_code, message, errors)

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: str,
        role: str = "User",
    ) -> AuthResponseDto:
        response = await self._request(
            "POST",
            "/auth/signup",
            json={
                "email": email,
                "password": password,
                "fullName": full_name,
                "role": role,
            },
        )
        return AuthResponseDto.model_validate(response.json())

    async def sign_in(self, email: str, password: str) -> AuthResponseDto:
        response = await self._request(
            "POST",
            "/auth/signin",
            json={"email": email, "password": password},
        )
        return AuthResponseDto.model_validate(response.json())

    # -------------------------------------------------------------------------
    # Blogs
    # -------------------------------------------------------------------------

    async def list_blogs(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> BlogPage:
        response = await self._request(
            "GET",
            "/blogs",
            params={"page": page, "pageSize": page_size},
        )
        dto = PaginatedBlogsDto.model_validate(response.json())
        return BlogPage.from_dto(dto, self._backend_url)

    async def get_blog(self, blog_id: int) -> BlogPost:
        response = await self._request("GET", f"/blogs/{blog_id}")
        return self._to_post(response)

    async def create_blog(
        self,
        title: str,
        content: str,
        images: Sequence[ImageUpload] = (),
    ) -> BlogPost:
        response = await self._request(
            "POST",
            "/blogs",
            data={"title": title, "content": content},
            files=self._files("images", images),
        )
        return self._to_post(response)

    async def update_blog(
        self,
        blog_id: int,
        title: str,
        content: str,
        new_images: Sequence[ImageUpload] = (),
    ) -> BlogPost:
        response = await self._request(
            "PUT",
            f"/blogs/{blog_id}",
            data={"title": title, "content": content},
            files=self._files("newImages", new_images),
        )
        return self._to_post(response)

    async def delete_blog(self, blog_id: int) -> None:
        await self._request("DELETE", f"/blogs/{blog_id}")

    def _to_post(self, response: httpx.Response) -> BlogPost:
        dto = BlogResponseDto.model_validate(response.json())
        return BlogPost.from_dto(dto, self._backend_url)

    @staticmethod
    def _files(
        field_name: str,
        images: Sequence[ImageUpload],
    ) -> Optional[list[tuple[str, tuple[str, bytes, str]]]]:
        if not images:
            return None
        return [
            (field_name, (image.filename, image.content, image.content_type))
            for image in images
        ]
