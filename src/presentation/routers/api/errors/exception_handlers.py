"""Global exception handlers for FastAPI application.

Handlers:
    http_exception_handler: HTTPException -> RFC 7807
    validation_exception_handler: RequestValidationError -> 400 with field errors
    generic_exception_handler: anything else -> 500 (logged, details hidden)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.errors.error_response_builder import problem_type
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    slug: str | None = None,
    title: str | None = None,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    default_title, default_slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=problem_type(request, slug or default_slug),
        title=title or default_title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=get_trace_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
        media_type="application/problem+json",
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException (e.g. from the auth dependency) to RFC 7807.

    Preserves exception headers such as WWW-Authenticate.
    """
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request,
        exc.status_code,
        detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert request validation errors to a 400 with per-field errors.

    Missing fields, malformed emails and password-policy violations all
    surface here; ``detail`` repeats the first message.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "newPassword"] -> "newPassword"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        message = str(error.get("msg", "Validation failed")).removeprefix("Value error, ")
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "body",
                code=error.get("type", "validation_error"),
                message=message,
            )
        )

    detail = field_errors[0].message if field_errors else "Request validation failed"
    return _problem_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        detail,
        slug="validation-failed",
        title="Validation Failed",
        errors=field_errors or None,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and return a generic 500.

    Never leaks stack traces or internal details to API consumers.
    """
    request.app.state.container.logger.error(
        "unhandled_exception",
        error=exc,
        trace_id=get_trace_id(),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
