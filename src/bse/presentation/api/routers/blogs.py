"""Blog posts router: paginated listing, reads and authorized writes."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from bse.application.commands import (
    CreateBlogPostCommand,
    DeleteBlogPostCommand,
    UpdateBlogPostCommand,
)
from bse.application.ports import UploadedFile
from bse.application.queries import GetBlogPostQuery, ListBlogPostsQuery
from bse.domain.blog import DEFAULT_PAGE_SIZE
from bse.presentation.api.dependencies import (
    AuthenticatedUser,
    ImageStorageDep,
    RepoFactory,
    SettingsDep,
)
from bse.presentation.api.schemas.blogs import (
    BlogPostResponse,
    PaginatedBlogPostsResponse,
)
from bse.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

UNAUTHORIZED_RESPONSE = {401: {"model": ErrorResponse, "description": "Not signed in"}}
NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Blog not found"}}
FORBIDDEN_RESPONSE = {
    403: {"model": ErrorResponse, "description": "Not the author and not an admin"},
}
BAD_REQUEST_RESPONSE = {
    400: {"model": ErrorResponse, "description": "Invalid input or image file"},
}


async def _read_uploads(
    files: Optional[list[UploadFile]],
    max_size: int,
) -> list[UploadedFile]:
    """Read multipart files into memory.

    At most ``max_size + 1`` bytes are read per part, enough for the
    storage size check to reject an oversized file without buffering it
    whole. Parts without a filename and without content (an empty file
    input) are skipped.
    """
    uploads: list[UploadedFile] = []
    for file in files or []:
        content = await file.read(max_size + 1)
        if not file.filename and not content:
            continue
        uploads.append(
            UploadedFile(
                filename=file.filename or "",
                content=content,
                content_type=file.content_type,
            )
        )
    return uploads


@router.get(
    "",
    summary="List blog posts",
    responses={200: {"description": "One page of posts, newest first"}},
)
async def list_blogs(
    factory: RepoFactory,
    page: Annotated[int, Query(description="1-based page number")] = 1,
    page_size: Annotated[
        int,
        Query(alias="pageSize", description="Items per page (max 100)"),
    ] = DEFAULT_PAGE_SIZE,
) -> PaginatedBlogPostsResponse:
    """
    List posts newest first.

    Out-of-range values are normalized: `page < 1` becomes 1,
    `pageSize < 1` becomes 10, `pageSize > 100` becomes 100.
    """
    query = ListBlogPostsQuery.from_factory(factory)
    result = await query.execute(page=page, page_size=page_size)
    return PaginatedBlogPostsResponse.from_dto(result)


@router.get(
    "/{blog_id}",
    summary="Get a blog post",
    responses={**NOT_FOUND_RESPONSE},
)
async def get_blog(blog_id: int, factory: RepoFactory) -> BlogPostResponse:
    query = GetBlogPostQuery.from_factory(factory)
    return BlogPostResponse.from_dto(await query.execute(blog_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog post",
    responses={**BAD_REQUEST_RESPONSE, **UNAUTHORIZED_RESPONSE},
)
async def create_blog(  # NOQA: PLR0913
    current_user: AuthenticatedUser,
    factory: RepoFactory,
    storage: ImageStorageDep,
    settings: SettingsDep,
    title: Annotated[str, Form(description="Post title (max 200 characters)")],
    content: Annotated[str, Form(description="Post body")],
    images: Annotated[
        Optional[list[UploadFile]],
        File(description="Image attachments (jpg, jpeg, png, gif, webp; max 5 MB)"),
    ] = None,
) -> BlogPostResponse:
    """
    Create a post authored by the signed-in user.

    Images are stored before the post is saved; one invalid image
    rejects the whole request.
    """
    uploads = await _read_uploads(images, settings.upload_max_file_size_bytes)
    command = CreateBlogPostCommand.from_factory(factory, storage)

    try:
        result = await command.execute(
            title=title,
            content=content,
            author_id=current_user.user_id,
            images=uploads,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return BlogPostResponse.from_dto(result)


@router.put(
    "/{blog_id}",
    summary="Update a blog post",
    responses={
        **BAD_REQUEST_RESPONSE,
        **UNAUTHORIZED_RESPONSE,
        **FORBIDDEN_RESPONSE,
        **NOT_FOUND_RESPONSE,
    },
)
async def update_blog(  # NOQA: PLR0913
    blog_id: int,
    current_user: AuthenticatedUser,
    factory: RepoFactory,
    storage: ImageStorageDep,
    settings: SettingsDep,
    title: Annotated[str, Form()],
    content: Annotated[str, Form()],
    new_images: Annotated[
        Optional[list[UploadFile]],
        File(alias="newImages", description="Images to append"),
    ] = None,
) -> BlogPostResponse:
    """
    Replace title and content and append any new images.

    Only the author or an admin may update. Existing images are kept.
    """
    uploads = await _read_uploads(new_images, settings.upload_max_file_size_bytes)
    command = UpdateBlogPostCommand.from_factory(factory, storage)

    try:
        result = await command.execute(
            post_id=blog_id,
            title=title,
            content=content,
            requester=current_user,
            new_images=uploads,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return BlogPostResponse.from_dto(result)


@router.delete(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a blog post",
    responses={**UNAUTHORIZED_RESPONSE, **FORBIDDEN_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def delete_blog(
    blog_id: int,
    current_user: AuthenticatedUser,
    factory: RepoFactory,
    storage: ImageStorageDep,
) -> None:
    """Delete a post, its image records and (best-effort) its image files."""
    command = DeleteBlogPostCommand.from_factory(factory, storage)

    try:
        await command.execute(post_id=blog_id, requester=current_user)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
