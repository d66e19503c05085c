"""FastAPI HTTP API.

Run with ``uvicorn bse.presentation.api.app:create_app --factory``.
"""

from bse.presentation.api.app import create_app

__all__ = ["create_app"]
