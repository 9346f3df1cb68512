from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from .errors import as_exception

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def matching(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep the value only if ``predicate`` accepts it.

        The predicate runs at most once and never on an absent option.
        """
        if self.is_some() and predicate(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    filter = matching

    def or_else_throw(self, error: Callable[[], Any]) -> T:
        """Unwrap, or raise whatever ``error()`` supplies.

        ``error`` is only called on the absent path. Exception instances
        and classes are raised directly (a class is built with no
        arguments); other values are wrapped in
        :class:`~optionkit.errors.Failure`.
        """
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise as_exception(error())

    def ok_or_else(self, error: Callable[[], E]) -> "Result[E, T]":
        from .result import Ok, Err
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(error())

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def get_or_else_get(self, default: Callable[[], U]) -> T | U:
        return self.value if self.is_some() else default()  # type: ignore[attr-defined]

    def if_some(self, f: Callable[[T], Any]) -> "Option[T]":
        if self.is_some():
            f(self.value)  # type: ignore[attr-defined]
        return self

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "None"
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


def matching(o: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    return o.matching(predicate)


def or_else_throw(o: Option[T], error: Callable[[], Any]) -> T:
    return o.or_else_throw(error)
