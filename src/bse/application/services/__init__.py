"""Application services."""

from bse.application.services.authentication_service import AuthenticationService

__all__ = ["AuthenticationService"]
