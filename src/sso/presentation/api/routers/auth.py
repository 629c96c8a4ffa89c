"""Authentication router for login, registration and admin checks."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator

from fastapi import APIRouter, Path, status

from sso.presentation.api.dependencies import AuthService, DBSession, SettingsDep
from sso.presentation.api.schemas.auth import (
    MAX_ID,
    IsAdminResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from sso_auth import DeadlineExceededError
from sso_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@asynccontextmanager
async def _deadline(op: str, settings: Settings) -> AsyncIterator[None]:
    """Bound a call by the configured API timeout.

    Expiry cancels the in-flight call and surfaces as
    ``DeadlineExceededError`` qualified with ``op``.
    """
    try:
        async with asyncio.timeout(settings.api_timeout.total_seconds()):
            yield
    except TimeoutError as e:
        logger.warning("%s: request exceeded %s", op, settings.api_timeout)
        raise DeadlineExceededError(op=op) from e


@router.post(
    "/login",
    summary="Authenticate user for an app",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid credentials, invalid app id or empty field"},
        504: {"description": "Deadline exceeded"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns a token signed with the private key of the requested app.
    An unknown email and a wrong password produce the same response.
    """
    async with _deadline("Auth.Login", settings):
        token = await auth_service.login(
            email=request.email,
            password=request.password,
            app_id=request.app_id,
        )
    return LoginResponse(token=token)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Empty email or password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> RegisterResponse:
    try:
        async with _deadline("Auth.Register", settings):
            user_id = await auth_service.register(
                email=request.email,
                password=request.password,
            )
            await session.commit()
    except Exception:
        await session.rollback()
        raise

    return RegisterResponse(user_id=user_id)


@router.get(
    "/users/{user_id}/is-admin",
    summary="Check whether a user is an admin",
    responses={
        200: {"description": "Admin flag of the user"},
        404: {"description": "User not found"},
    },
)
async def is_admin(
    user_id: Annotated[int, Path(gt=0, le=MAX_ID)],
    auth_service: AuthService,
    settings: SettingsDep,
) -> IsAdminResponse:
    async with _deadline("Auth.IsAdmin", settings):
        result = await auth_service.is_admin(user_id)
    return IsAdminResponse(is_admin=result)
