from bse.application.queries.blog.get_blog_post_query import GetBlogPostQuery
from bse.application.queries.blog.list_blog_posts_query import ListBlogPostsQuery

__all__ = [
    "GetBlogPostQuery",
    "ListBlogPostsQuery",
]
