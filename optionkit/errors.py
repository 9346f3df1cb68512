from __future__ import annotations
from typing import Any, Generic, TypeVar

E = TypeVar("E")


class Failure(Exception, Generic[E]):
    """Carries an arbitrary (non-exception) error value through ``raise``."""

    def __init__(self, error: E):
        super().__init__(repr(error)); self.error = error


class SlotOccupied(Exception):
    def __init__(self, current: Any, kind: type):
        super().__init__(f"slot holds {type(current).__name__}, refusing to replace with {kind.__name__}")
        self.current = current
        self.kind = kind


def as_exception(err: Any) -> BaseException:
    """Turn a supplied error value into something ``raise`` accepts.

    Exception classes are instantiated with no arguments, so only classes
    without required constructor arguments are supported; for others,
    supply an instance.
    """
    if isinstance(err, BaseException):
        return err
    if isinstance(err, type) and issubclass(err, BaseException):
        return err()
    return Failure(err)
