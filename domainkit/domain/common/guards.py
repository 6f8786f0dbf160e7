"""
Precondition guards for attribute-level validation.

Guards fail fast: the first broken constraint raises
InvalidArgumentError and nothing else is checked.
"""

from .exceptions import InvalidArgumentError


def require(condition: bool, constraint: str, field: str | None = None, value: object = None) -> None:
    """Raise InvalidArgumentError describing ``constraint`` unless ``condition`` holds."""
    if not condition:
        raise InvalidArgumentError(constraint, field=field, value=value)


def require_not_blank(value: str | None, field: str) -> str:
    """Return ``value`` stripped, or raise if it is empty or whitespace only."""
    if value is None or not value.strip():
        raise InvalidArgumentError(f"{field} cannot be empty", field=field, value=value)
    return value.strip()


def require_max_length(value: str, field: str, max_length: int) -> str:
    if len(value) > max_length:
        raise InvalidArgumentError(
            f"{field} cannot exceed {max_length} characters", field=field, value=value
        )
    return value
