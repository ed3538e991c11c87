"""
Result Type Implementation.

Explicit Ok/Err values for operations whose failure is an expected outcome
(a document without a usable root) rather than an exceptional one.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful computation."""
    value: T

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents a failed computation."""
    error: E

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]
