from bse.presentation.api.routers.auth import router as auth_router
from bse.presentation.api.routers.blogs import router as blogs_router

__all__ = [
    "auth_router",
    "blogs_router",
]
