# xfighter/core/result.py
"""Tagged results returned by the non-raising API variants."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from ..exceptions import XfighterError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    is_ok = True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default):
        return self.value

    def map(self, fn: Callable[[T], Any]) -> "Ok":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result"]) -> "Result":
        return fn(self.value)


@dataclass(frozen=True)
class Err:
    error: XfighterError

    is_ok = False

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default):
        return default

    def map(self, fn) -> "Err":
        return self

    def and_then(self, fn) -> "Err":
        return self


Result = Union[Ok[T], Err]
