"""
Composite validation framework.

Attribute-level invariants are enforced by constructors and mutators
through guards and fail on the first problem. Composite validation runs
over an already constructed object and reports every relational problem
it finds to a ValidationHandler instead of raising.

A handler interface is specific to the aggregate it validates and has one
method per kind of violation:

    class AddressValidationHandler(Protocol):
        def city_not_in_country(self, city: str, country_code: CountryCode) -> None: ...
        def invalid_postcode(self, postcode: str, country_code: CountryCode) -> None: ...

Handlers that just want the violations as data extend
ValidationResultHandler and record into its ValidationResult.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

Subject = TypeVar("Subject")
Handler = TypeVar("Handler")


@dataclass(frozen=True)
class Violation:
    """One recorded rule violation."""

    kind: str
    message: str


class ValidationResult:
    """Ordered violations collected during one validation pass. Empty means valid."""

    def __init__(self) -> None:
        self._violations: list[Violation] = []

    def add(self, kind: str, message: str) -> None:
        self._violations.append(Violation(kind=kind, message=message))

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    @property
    def kinds(self) -> list[str]:
        return [violation.kind for violation in self._violations]

    @property
    def is_valid(self) -> bool:
        return not self._violations

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)

    def __len__(self) -> int:
        return len(self._violations)

    def __repr__(self) -> str:
        return f"ValidationResult({self._violations!r})"


class ValidationResultHandler:
    """Base for handlers that collect violations into a ValidationResult."""

    def __init__(self, result: ValidationResult | None = None) -> None:
        self.result = result if result is not None else ValidationResult()

    def _record(self, kind: str, message: str) -> None:
        self.result.add(kind, message)


class CompositeValidator(ABC, Generic[Subject, Handler]):
    """
    Validator for relational rules of a constructed aggregate.

    Implementations must not mutate the subject and must not raise for
    rule violations; each violated rule calls one handler method.
    """

    @abstractmethod
    def validate(self, subject: Subject, handler: Handler) -> None:
        raise NotImplementedError
