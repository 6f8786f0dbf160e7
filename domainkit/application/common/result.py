"""
Result type for use case outcomes.

The Result type makes success and failure explicit where a failure is an
expected outcome rather than an error, such as an address that fails
composite validation.

Example:
    outcome = verification_service.verify(address)
    if outcome.is_success:
        store.add(outcome.unwrap())
    else:
        for violation in outcome.unwrap_error():
            print(violation.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        """Raises ValueError - Success has no error."""
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError("Cannot get value from Failure result")

    def unwrap_error(self) -> E:
        return self.error


# Type alias for Result - a union of Success and Failure
Result = Success[T] | Failure[E]
