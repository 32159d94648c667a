"""Base error value for Railway-Oriented Programming.

Errors are data, not exceptions: services return
``Failure(error=SomeDomainError(...))`` and callers ``match`` on the
result. Concrete kinds (AuthError, AuditError) live in src.domain.errors.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error kind; callers switch on this.
        message: User-facing message, safe to return over HTTP.
        details: Optional string context (e.g. retry_after_minutes).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
