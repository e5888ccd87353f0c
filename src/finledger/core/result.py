#!/usr/bin/env python3
"""
Result Type

Explicit success-or-failure values returned by store access, export-from-store
and import operations. Failures carry a human-readable message and an optional
underlying exception.

Examples:
    >>> ok(2).map(lambda v: v * 2).unwrap()
    4
    >>> err("nope").map(lambda v: v * 2).is_err
    True
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import ResultError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome wrapping a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def map(self, transform: Callable[[T], R]) -> "Ok[R]":
        """Apply ``transform`` to the wrapped value."""
        return Ok(transform(self.value))

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def on_ok(self, block: Callable[[T], Any]) -> "Ok[T]":
        """Invoke ``block`` with the value, then return self."""
        block(self.value)
        return self

    def on_err(self, block: Callable[[str, BaseException | None], Any]) -> "Ok[T]":
        return self


@dataclass(frozen=True)
class Err:
    """Failed outcome with a message and optional cause."""

    message: str
    cause: BaseException | None = None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def map(self, transform: Callable[[Any], Any]) -> "Err":
        """Errors propagate unchanged."""
        return self

    def unwrap(self) -> Any:
        """
        Raise ResultError carrying the original message.

        Raises:
            ResultError: always, chained from ``cause`` when present
        """
        raise ResultError(self.message) from self.cause

    def unwrap_or(self, default: Any) -> Any:
        return default

    def on_ok(self, block: Callable[[Any], Any]) -> "Err":
        return self

    def on_err(self, block: Callable[[str, BaseException | None], Any]) -> "Err":
        """Invoke ``block`` with message and cause, then return self."""
        block(self.message, self.cause)
        return self


Result = Union[Ok[T], Err]


def ok(value: T) -> Ok[T]:
    """Build a successful Result."""
    return Ok(value)


def err(message: str, cause: BaseException | None = None) -> Err:
    """Build a failed Result."""
    return Err(message, cause)
