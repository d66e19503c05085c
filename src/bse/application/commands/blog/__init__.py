from bse.application.commands.blog.create_blog_post_command import (
    CreateBlogPostCommand,
)
from bse.application.commands.blog.delete_blog_post_command import (
    DeleteBlogPostCommand,
)
from bse.application.commands.blog.update_blog_post_command import (
    UpdateBlogPostCommand,
)

__all__ = [
    "CreateBlogPostCommand",
    "DeleteBlogPostCommand",
    "UpdateBlogPostCommand",
]
