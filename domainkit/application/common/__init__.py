"""
Application common module.

Contains base classes for application layer:
- Result: Result type for use case outcomes
- UnitOfWork: Persist tracked aggregates, then dispatch their events
"""

from .result import Failure, Result, Success
from .unit_of_work import UnitOfWork

__all__ = [
    "Failure",
    "Result",
    "Success",
    "UnitOfWork",
]
