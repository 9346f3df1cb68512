from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import as_exception
from .option import NONE, Option, Some

E = TypeVar("E")
A = TypeVar("A")


class Result(Generic[E, A]):
    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def or_else_throw(self) -> A:
        # Err payloads go through the same rules as Option.or_else_throw
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        raise as_exception(self.error)  # type: ignore[attr-defined]

    def to_option(self) -> Option[A]:
        return Some(self.value) if self.is_ok() else NONE  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Ok(Result[E, A]):
    value: A
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[E, A]):
    error: E
    def is_ok(self) -> bool: return False


def from_option(o: Option[A], error: Callable[[], E]) -> Result[E, A]:
    return o.ok_or_else(error)


def to_option(r: Result[E, A]) -> Option[A]:
    return r.to_option()
