"""Authentication router.

Endpoints:
    POST /api/auth/login            - Login (creates session, sets cookie)
    POST /api/auth/refresh          - Rotate refresh token (same session)
    POST /api/auth/logout           - Logout (deletes session, clears cookie)
    GET  /api/auth/me               - Current user profile
    POST /api/auth/change-password  - Change password (revokes all sessions)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.services import AuthService
from src.core.config import Settings
from src.core.container import get_auth_service, get_settings_dependency
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder, ProblemDetails
from src.presentation.routers.api.middleware import AuthenticatedUser, RequestClient
from src.schemas.auth_schemas import (
    ChangePasswordRequest,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    UserProfileResponse,
)
from src.schemas.common_schemas import MessageResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"description": "Validation failed", "model": ProblemDetails},
    401: {"description": "Authentication failed", "model": ProblemDetails},
}


def _set_auth_cookie(response: Response, access_token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=access_token,
        max_age=settings.cookie_max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def _clear_auth_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses=_ERROR_RESPONSES,
    summary="Login",
    description="Verify credentials and open a new session. "
    "Five consecutive failures lock the account for 30 minutes.",
)
async def login(
    request: Request,
    response: Response,
    data: LoginRequest,
    client: RequestClient,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> LoginResponse | JSONResponse:
    """POST /api/auth/login -> 200 OK with token pair and public user."""
    result = await auth_service.login(
        email=str(data.email), password=data.password, client=client
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=login_result):
            _set_auth_cookie(response, login_result.tokens.access_token, settings)
            return LoginResponse.from_result(login_result)


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    responses=_ERROR_RESPONSES,
    summary="Refresh tokens",
    description="Exchange a refresh token for a new pair. The old refresh "
    "token stops working immediately.",
)
async def refresh(
    request: Request,
    response: Response,
    data: RefreshRequest,
    client: RequestClient,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RefreshResponse | JSONResponse:
    """POST /api/auth/refresh -> 200 OK with the rotated pair."""
    result = await auth_service.refresh_token(
        refresh_token=data.refresh_token, client=client
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=tokens):
            _set_auth_cookie(response, tokens.access_token, settings)
            return RefreshResponse.from_tokens(tokens)


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={401: _ERROR_RESPONSES[401]},
    summary="Logout",
)
async def logout(
    response: Response,
    current_user: AuthenticatedUser,
    client: RequestClient,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> MessageResponse:
    """POST /api/auth/logout -> 200 OK. Deletes the session of this token."""
    await auth_service.logout(
        access_token=current_user.access_token,
        user_id=current_user.user_id,
        client=client,
    )
    _clear_auth_cookie(response, settings)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    responses={401: _ERROR_RESPONSES[401]},
    summary="Current user",
)
async def me(
    request: Request,
    current_user: AuthenticatedUser,
    auth_service: AuthService = Depends(get_auth_service),
) -> CurrentUserResponse | JSONResponse:
    result = await auth_service.get_current_user(current_user.user_id)

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=profile):
            return CurrentUserResponse(user=UserProfileResponse.from_dto(profile))


@router.post(
    "/change-password",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
    summary="Change password",
    description="Verify the current password, store the new one and revoke "
    "every session of the user, including the current one.",
)
async def change_password(
    request: Request,
    response: Response,
    data: ChangePasswordRequest,
    current_user: AuthenticatedUser,
    client: RequestClient,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> MessageResponse | JSONResponse:
    """POST /api/auth/change-password -> 200 OK. Re-login required afterwards."""
    result = await auth_service.change_password(
        user_id=current_user.user_id,
        current_password=data.current_password,
        new_password=data.new_password,
        client=client,
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            _clear_auth_cookie(response, settings)
            return MessageResponse(
                message="Password changed successfully. Please login again."
            )
