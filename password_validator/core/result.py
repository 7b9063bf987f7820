"""Result types for railway-oriented programming.

Rules report their outcome as data instead of raising. A passing rule returns
``Success(value=None)``; a failing rule returns ``Failure(error=...)`` carrying
the PasswordError that describes the violation.

Usage:
    def check(password: str) -> Result[None, PasswordError]:
        if not password:
            return Failure(error=TooShort())
        return Success(value=None)

    match check("secret"):
        case Success():
            print("ok")
        case Failure(error=error):
            print(error.description)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value (None for rule checks).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
