"""API configuration adapter.

Bridges the centralized bse_config settings with the API layer. Every
dependency that needs settings goes through ``get_api_settings`` so tests
can swap them with ``app.dependency_overrides``.
"""

from functools import lru_cache

from bse_config.settings import Settings, get_settings


@lru_cache
def get_api_settings() -> Settings:
    """Get settings from centralized configuration."""
    return get_settings()
