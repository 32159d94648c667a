"""Authentication dependencies for protected routes.

The access token is read from the ``Authorization: Bearer`` header, or
from the auth cookie set at login when the header is absent. Validation
(signature, expiry, session row, user status) is delegated to
``AuthService.authenticate_request``.

Usage:
    @router.get("/protected")
    async def protected_route(current_user: AuthenticatedUser):
        return {"user_id": str(current_user.user_id)}
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.dtos import ClientInfo, CurrentUser
from src.application.services import AuthService
from src.core.container import get_auth_service
from src.core.result import Failure, Success

# auto_error=False so the cookie fallback can run
bearer_scheme = HTTPBearer(auto_error=False)


def extract_access_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Bearer header first, then the auth cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    cookie_name = request.app.state.container.settings.auth_cookie_name
    return request.cookies.get(cookie_name) or None


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> CurrentUser:
    """Authenticate the caller of a protected route.

    Raises:
        HTTPException: 401 with ``WWW-Authenticate: Bearer`` when the token
            is missing, invalid or expired, its session is gone, or the user
            is no longer active.
    """
    access_token = extract_access_token(request, credentials)

    match await auth_service.authenticate_request(access_token):
        case Success(value=current_user):
            return current_user
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error.message,
                headers={"WWW-Authenticate": "Bearer"},
            )


def get_client_info(request: Request) -> ClientInfo:
    """Client IP and user agent of the request (advisory only)."""
    return ClientInfo(
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
RequestClient = Annotated[ClientInfo, Depends(get_client_info)]
