"""Error response builder for RFC 7807 Problem Details.

Converts domain error values (Failure results) returned by the
application services into HTTP responses.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.errors.problem_details import ProblemDetails

_ERROR_STATUS: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.INVALID_CREDENTIALS: (status.HTTP_401_UNAUTHORIZED, "Authentication Failed"),
    ErrorCode.ACCOUNT_LOCKED: (status.HTTP_401_UNAUTHORIZED, "Account Locked"),
    ErrorCode.ACCOUNT_INACTIVE: (status.HTTP_401_UNAUTHORIZED, "Account Inactive"),
    ErrorCode.INVALID_OR_EXPIRED_TOKEN: (status.HTTP_401_UNAUTHORIZED, "Invalid Token"),
    ErrorCode.AUTHENTICATION_REQUIRED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ErrorCode.SESSION_INVALID: (status.HTTP_401_UNAUTHORIZED, "Session Invalid"),
    ErrorCode.USER_INACTIVE: (status.HTTP_401_UNAUTHORIZED, "User Inactive"),
    ErrorCode.INVALID_CURRENT_PASSWORD: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorCode.UNAUTHORIZED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ErrorCode.SELF_REVOKE_FORBIDDEN: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
}


def problem_type(request: Request, slug: str) -> str:
    """Problem type URI under the configured public base URL."""
    return f"{request.app.state.container.settings.api_base_url}/errors/{slug}"


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> match await auth_service.login(email=email, password=password):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def status_for(code: ErrorCode) -> int:
        return _ERROR_STATUS.get(code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ""))[0]

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Convert a domain error to an RFC 7807 JSON response.

        Args:
            error: Error value from a Failure result.
            request: Current request (for instance path and base URL).
            headers: Extra response headers (e.g. WWW-Authenticate).

        Returns:
            JSONResponse with the mapped status code.
        """
        status_code, title = _ERROR_STATUS.get(
            error.code,
            (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
        )
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer", **(headers or {})}

        problem = ProblemDetails(
            type=problem_type(request, error.code.value),
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=get_trace_id(),
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
            media_type="application/problem+json",
        )
