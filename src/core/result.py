"""Result types for railway-oriented programming.

Service operations return a Result instead of raising, so every caller is
forced to handle each failure kind explicitly.

Usage:
    result = await auth_service.login(email=email, password=password)
    match result:
        case Success(value=login):
            return login.tokens
        case Failure(error=error):
            return map_error(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
