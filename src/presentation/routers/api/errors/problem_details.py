"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error (validation failures).

    Examples:
        >>> ErrorDetail(
        ...     field="newPassword",
        ...     code="value_error",
        ...     message="New password must be at least 8 characters long",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details.

    The last path segment of ``type`` is the machine-readable error code
    (e.g. ``.../errors/account_locked``).

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/invalid_credentials",
        ...     title="Authentication Failed",
        ...     status=401,
        ...     detail="Invalid email or password",
        ...     instance="/api/auth/login",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/invalid_credentials"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Authentication Failed"],
    )
    status: int = Field(..., description="HTTP status code", examples=[401])
    detail: str = Field(
        ...,
        description="Human-readable explanation for this occurrence",
        examples=["Invalid email or password"],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/auth/login"],
    )
    errors: list[ErrorDetail] | None = Field(
        default=None,
        description="Field-specific errors (validation failures)",
    )
    trace_id: str | None = Field(
        default=None,
        description="Request trace ID for debugging",
    )
