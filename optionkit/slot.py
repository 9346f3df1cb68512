from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import SlotOccupied
from .logger import ConsoleLogger, current_logger
from .option import NONE, Option, Some, from_nullable

T = TypeVar("T")
V = TypeVar("V")


def _wrap(v: Any) -> Option[Any]:
    # Some(None) reads as empty, the same as an attribute holding None
    if isinstance(v, Option):
        return v.flat_map(from_nullable)
    return from_nullable(v)


class Slot(Generic[T]):
    """Caller-owned mutable cell holding an ``Option[T]``.

    No locking: callers must not share a slot across threads while
    :meth:`get_or_insert` runs.
    """

    def __init__(self, initial: Any = None):
        self._value: Option[T] = _wrap(initial)

    def get(self) -> Option[T]:
        return self._value

    def set(self, v: Any) -> None:
        self._value = _wrap(v)

    def clear(self) -> None:
        self._value = NONE

    def is_empty(self) -> bool:
        return self.get().is_none()

    def get_or_insert(self, factory: Callable[[], V], kind: Optional[type] = None, *, replace: bool = True, logger: Optional[ConsoleLogger] = None) -> V:
        return get_or_insert(self, factory, kind, replace=replace, logger=logger)

    def __repr__(self) -> str:
        return f"Slot({self._value!r})"


class AttributeSlot(Slot[T]):
    """Slot view over ``obj.<name>``; ``None`` or a missing attribute is absent."""

    def __init__(self, obj: Any, name: str):
        self.obj = obj
        self.name = name

    def get(self) -> Option[T]:
        return from_nullable(getattr(self.obj, self.name, None))

    def set(self, v: Any) -> None:
        setattr(self.obj, self.name, _wrap(v).to_nullable())

    def clear(self) -> None:
        setattr(self.obj, self.name, None)

    def __repr__(self) -> str:
        return f"AttributeSlot({type(self.obj).__name__}.{self.name}={self.get()!r})"


def get_or_insert(slot: Slot[Any], factory: Callable[[], V], kind: Optional[type] = None, *, replace: bool = True, logger: Optional[ConsoleLogger] = None) -> V:
    """Return the slot's value if it is a ``kind``, otherwise build and store one.

    ``kind`` defaults to ``factory`` when the factory is a class. On a miss
    the factory runs exactly once and its result overwrites whatever the
    slot held, including a value of another variant, which is lost. That
    overwrite is logged at WARN; pass ``replace=False`` to get
    :class:`SlotOccupied` instead.
    """
    if kind is None:
        if not isinstance(factory, type):
            raise TypeError("get_or_insert needs kind= when factory is not a class")
        kind = factory
    elif not isinstance(kind, type):
        raise TypeError(f"get_or_insert kind must be a class, got {kind!r}")
    log = logger or current_logger()
    current = slot.get()
    if isinstance(current, Some):
        if isinstance(current.value, kind):
            return current.value  # type: ignore[return-value]
        if not replace:
            raise SlotOccupied(current.value, kind)
    created = factory()
    slot.set(Some(created))
    if log:
        if isinstance(current, Some):
            log.warn("slot.replace", previous=type(current.value).__name__, kind=kind.__name__)
        else:
            log.debug("slot.insert", kind=kind.__name__)
    return created
