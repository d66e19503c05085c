"""Schemas for sign-up and sign-in."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from bse.application.dtos import AuthResultDTO
from bse.presentation.api.schemas.common import CamelModel


class SignUpRequest(CamelModel):
    """Request schema for creating an account."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="Password (6-72 characters)",
    )
    full_name: str = Field(..., min_length=1, max_length=100)
    role: str = Field(default="User", pattern=r"^(User|Admin)$")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@example.com",
                "password": "secret123",
                "fullName": "Jane Doe",
                "role": "User",
            },
        },
    )


class SignInRequest(CamelModel):
    """Request schema for signing in."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "jane@example.com", "password": "secret123"},
        },
    )


class AuthResponse(CamelModel):
    """Token and user summary returned after sign-up or sign-in."""

    token: str = Field(..., description="Bearer token for the Authorization header")
    email: str
    full_name: str
    role: str
    expires_at: datetime

    @classmethod
    def from_dto(cls, dto: AuthResultDTO) -> "AuthResponse":
        return cls(
            token=dto.token,
            email=dto.email,
            full_name=dto.full_name,
            role=dto.role.value,
            expires_at=dto.expires_at,
        )
