"""Admin session-management router.

Every endpoint requires an authenticated caller with the admin role;
non-admins receive 403 "Admin access required".

Endpoints:
    GET    /api/admin/sessions                            - Active sessions
    GET    /api/admin/sessions/stats                      - Statistics
    GET    /api/admin/sessions/users/{user_id}            - One user's sessions
    DELETE /api/admin/sessions/{session_id}               - Revoke one session
    DELETE /api/admin/sessions/users/{user_id}/revoke-all - Revoke a user's sessions
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.services import AdminSessionService
from src.core.container import get_admin_session_service
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder, ProblemDetails
from src.presentation.routers.api.middleware import AuthenticatedUser, RequestClient
from src.schemas.session_schemas import (
    RevokeSessionResponse,
    RevokeUserSessionsResponse,
    SessionListResponse,
    SessionStatsResponse,
)

router = APIRouter(prefix="/admin/sessions", tags=["Admin Sessions"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Authentication required", "model": ProblemDetails},
    403: {"description": "Admin access required", "model": ProblemDetails},
}


@router.get(
    "",
    response_model=SessionListResponse,
    responses=_ERROR_RESPONSES,
    summary="List active sessions",
)
async def list_active_sessions(
    request: Request,
    current_user: AuthenticatedUser,
    service: AdminSessionService = Depends(get_admin_session_service),
) -> SessionListResponse | JSONResponse:
    match await service.list_active_sessions(current_user):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=views):
            return SessionListResponse.from_views(views)


@router.get(
    "/stats",
    response_model=SessionStatsResponse,
    responses=_ERROR_RESPONSES,
    summary="Session statistics",
    description="Active and total session counts, sessions used in the last "
    "24 hours and the ten users with the most active sessions.",
)
async def get_session_stats(
    request: Request,
    current_user: AuthenticatedUser,
    service: AdminSessionService = Depends(get_admin_session_service),
) -> SessionStatsResponse | JSONResponse:
    match await service.get_session_stats(current_user):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=stats):
            return SessionStatsResponse.from_dto(stats)


@router.get(
    "/users/{user_id}",
    response_model=SessionListResponse,
    responses=_ERROR_RESPONSES,
    summary="List a user's sessions",
)
async def list_user_sessions(
    request: Request,
    current_user: AuthenticatedUser,
    user_id: UUID = Path(..., description="User ID"),
    service: AdminSessionService = Depends(get_admin_session_service),
) -> SessionListResponse | JSONResponse:
    match await service.list_user_sessions(current_user, user_id):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=views):
            return SessionListResponse.from_views(views)


@router.delete(
    "/{session_id}",
    response_model=RevokeSessionResponse,
    responses={
        **_ERROR_RESPONSES,
        404: {"description": "Session not found", "model": ProblemDetails},
    },
    summary="Revoke a session",
)
async def revoke_session(
    request: Request,
    current_user: AuthenticatedUser,
    client: RequestClient,
    session_id: UUID = Path(..., description="Session ID"),
    service: AdminSessionService = Depends(get_admin_session_service),
) -> RevokeSessionResponse | JSONResponse:
    """DELETE /api/admin/sessions/{session_id} -> 200 OK, 404 if unknown."""
    match await service.revoke_session(current_user, session_id, client):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=revoked):
            return RevokeSessionResponse(
                session_id=revoked.session_id, user_id=revoked.user_id
            )


@router.delete(
    "/users/{user_id}/revoke-all",
    response_model=RevokeUserSessionsResponse,
    responses=_ERROR_RESPONSES,
    summary="Revoke all sessions of a user",
    description="Admins cannot target themselves through this endpoint.",
)
async def revoke_user_sessions(
    request: Request,
    current_user: AuthenticatedUser,
    client: RequestClient,
    user_id: UUID = Path(..., description="User ID"),
    service: AdminSessionService = Depends(get_admin_session_service),
) -> RevokeUserSessionsResponse | JSONResponse:
    match await service.revoke_user_sessions(current_user, user_id, client):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=revoked):
            return RevokeUserSessionsResponse(
                message=f"Revoked {revoked.sessions_revoked} session(s)",
                user_id=revoked.user_id,
                sessions_revoked=revoked.sessions_revoked,
            )
