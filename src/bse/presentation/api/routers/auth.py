"""Authentication router for sign-up and sign-in."""

import logging

from fastapi import APIRouter, status

from bse.presentation.api.dependencies import AuthService, DBSession
from bse.presentation.api.schemas.auth import (
    AuthResponse,
    SignInRequest,
    SignUpRequest,
)
from bse.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account created, token issued"},
        400: {
            "model": ErrorResponse,
            "description": "Invalid input or email already registered",
        },
    },
)
async def sign_up(
    request: SignUpRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Register a new user and return a bearer token.

    The role defaults to `User`. Duplicate emails are rejected with 400.
    """
    try:
        result = await auth_service.sign_up(
            email=request.email,
            password=request.password,
            full_name=request.full_name,
            role=request.role,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        # Let the global exception handlers map domain and auth errors
        raise

    return AuthResponse.from_dto(result)


@router.post(
    "/signin",
    summary="Sign in with email and password",
    responses={
        200: {"description": "Signed in, token issued"},
        400: {"model": ErrorResponse, "description": "Malformed request"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
async def sign_in(
    request: SignInRequest,
    auth_service: AuthService,
) -> AuthResponse:
    """
    Authenticate and return a bearer token.

    An unknown email and a wrong password give the same 401 response.
    """
    result = await auth_service.sign_in(email=request.email, password=request.password)
    return AuthResponse.from_dto(result)
