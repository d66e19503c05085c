from bse.domain.blog.entities.blog_image import BlogImage

__all__ = ["BlogImage"]
