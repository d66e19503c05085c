"""Unit tests for the blog post DTOs."""

import pytest

from bse.application.dtos import BlogImageDTO, BlogPostDTO
from bse.domain.blog import BlogImage, BlogPost
from tests.shared.fixtures.factories import make_saved_post


class TestBlogPostDTO:
    def test_from_saved_post(self):
        post = make_saved_post(post_id=4, image_urls=("/uploads/blogs/a.png",))

        dto = BlogPostDTO.from_blog_post(post)

        assert dto.id == 4
        assert dto.author_name == "Alice Author"
        assert dto.images == (BlogImageDTO(id=1, image_url="/uploads/blogs/a.png"),)

    def test_unsaved_post_rejected(self):
        post = BlogPost.create("Hello", "Body", author_id=1)

        with pytest.raises(ValueError, match="unsaved blog post"):
            BlogPostDTO.from_blog_post(post)

    def test_unsaved_image_rejected(self):
        post = make_saved_post(post_id=4)
        post.add_images(["/uploads/blogs/new.png"])

        with pytest.raises(ValueError, match="unsaved blog image"):
            BlogPostDTO.from_blog_post(post)


class TestBlogImageDTO:
    def test_unsaved_image_has_no_id(self):
        with pytest.raises(ValueError, match="unsaved blog image"):
            BlogImageDTO.from_image(BlogImage(image_url="/uploads/blogs/x.png"))
