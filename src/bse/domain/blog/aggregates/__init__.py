from bse.domain.blog.aggregates.blog_post import BlogPost

__all__ = ["BlogPost"]
