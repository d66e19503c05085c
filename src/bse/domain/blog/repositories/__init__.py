from bse.domain.blog.repositories.blog_post_repository import BlogPostRepository

__all__ = ["BlogPostRepository"]
