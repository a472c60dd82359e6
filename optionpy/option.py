from __future__ import annotations
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from .logger import get_logger
from .state import ABSENT, ExpectError, OptionState, Present

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_log = get_logger("optionpy.option")


def _require_option(result: Any, operation: str) -> "Option[Any]":
    if not isinstance(result, Option):
        raise TypeError(f"{operation} callback must return an Option, got {type(result).__name__}")
    return result


def _structural_eq(a: Any, b: Any) -> bool:
    if isinstance(a, Option):
        return a.equals(b)
    return a == b


class Option(Generic[T]):
    """A value that may or may not be present.

    The instance owns a single replaceable state slot (``Present`` or
    ``Absent``). Combinators return new instances; ``insert``,
    ``get_or_insert``, ``get_or_insert_with``, ``take``, ``replace`` and
    ``take_if`` swap the slot of the receiver in place.

    ``==`` is identity. Use :meth:`equals` for structural comparison.
    """

    __slots__ = ("_state",)

    def __init__(self, state: OptionState[T] = ABSENT):
        self._state: OptionState[T] = state

    # construction

    @staticmethod
    def some(value: U) -> "Option[U]":
        return Option(Present(value))

    @staticmethod
    def none() -> "Option[Any]":
        return Option(ABSENT)

    @staticmethod
    def from_nullable(value: Optional[U]) -> "Option[U]":
        return Option.some(value) if value is not None else Option.none()

    def __repr__(self) -> str:
        if self.is_some():
            return f"Some({self._state.value!r})"  # type: ignore[attr-defined]
        return "Nothing"

    def _set(self, state: OptionState[T], operation: str) -> None:
        prev = self._state
        self._state = state
        if _log.is_enabled("DEBUG"):
            _log.debug(f"option.{operation}", before=prev, after=state)

    # queries

    def is_some(self) -> bool: return self._state.is_present()
    def is_none(self) -> bool: return self._state.is_absent()

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return self.is_some() and bool(predicate(self._state.value))  # type: ignore[attr-defined]

    def is_some_but(self, predicate: Callable[[T], bool]) -> bool:
        return self.is_some() and not predicate(self._state.value)  # type: ignore[attr-defined]

    # extraction

    def unwrap(self) -> T:
        if self.is_none():
            _log.debug("option.unwrap on empty option")
        return self._state.unwrap()

    def expect(self, error: ExpectError) -> T:
        return self._state.expect(error)

    def unwrap_or(self, default: T) -> T:
        return self._state.unwrap_or(default)

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return self._state.unwrap_or_else(fn)

    # transformation

    def map(self, fn: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Option.some(fn(self._state.value))  # type: ignore[attr-defined]
        return Option.none()

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and predicate(self._state.value):  # type: ignore[attr-defined]
            return Option.some(self._state.value)  # type: ignore[attr-defined]
        return Option.none()

    def flatten(self) -> "Option[Any]":
        """Remove one level of nesting; a non-nested option is returned as an equal copy."""
        if self.is_none():
            return Option.none()
        inner = self._state.value  # type: ignore[attr-defined]
        if isinstance(inner, Option):
            return inner
        return Option.some(inner)

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        if self.is_some():
            return fn(self._state.value)  # type: ignore[attr-defined]
        return default

    def map_or_else(self, default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
        if self.is_some():
            return fn(self._state.value)  # type: ignore[attr-defined]
        return default_fn()

    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        if self.is_some() and other.is_some():
            return Option.some((self._state.value, other._state.value))  # type: ignore[attr-defined]
        return Option.none()

    def zip_with(self, other: "Option[U]", fn: Callable[[T, U], R]) -> "Option[R]":
        if self.is_some() and other.is_some():
            return Option.some(fn(self._state.value, other._state.value))  # type: ignore[attr-defined]
        return Option.none()

    def and_(self, other: "Option[U]") -> "Option[U]":
        return other if self.is_some() else Option.none()

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self if self.is_some() else other

    def xor(self, other: "Option[T]") -> "Option[T]":
        if self.is_some() and other.is_none():
            return self
        if self.is_none() and other.is_some():
            return other
        return Option.none()

    def and_then(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return _require_option(fn(self._state.value), "and_then")  # type: ignore[attr-defined]
        return Option.none()

    def or_else(self, fn: Callable[[], "Option[T]"]) -> "Option[T]":
        if self.is_some():
            return self
        return _require_option(fn(), "or_else")

    # mutation

    def insert(self, value: T) -> "Option[T]":
        self._set(Present(value), "insert")
        return self

    def get_or_insert(self, value: T) -> T:
        if self.is_none():
            self._set(Present(value), "get_or_insert")
        return self._state.value  # type: ignore[attr-defined]

    def get_or_insert_with(self, fn: Callable[[], T]) -> T:
        if self.is_none():
            self._set(Present(fn()), "get_or_insert_with")
        return self._state.value  # type: ignore[attr-defined]

    def take(self) -> "Option[T]":
        prev = Option(self._state)
        if self.is_some():
            self._set(ABSENT, "take")
        return prev

    def replace(self, value: T) -> "Option[T]":
        prev = Option(self._state)
        self._set(Present(value), "replace")
        return prev

    def take_if(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_some_and(predicate):
            return self.take()
        return Option.none()

    # side effects

    def if_some(self, fn: Callable[[T], Any]) -> "Option[T]":
        if self.is_some():
            fn(self._state.value)  # type: ignore[attr-defined]
        return self

    def if_none(self, fn: Callable[[], Any]) -> "Option[T]":
        if self.is_none():
            fn()
        return self

    inspect = if_some
    inspect_content = if_some

    # conversion and equality

    def to_list(self) -> List[T]:
        return [self._state.value] if self.is_some() else []  # type: ignore[attr-defined]

    def equals(self, other: object) -> bool:
        return self.equals_with(other, _structural_eq)

    def equals_with(self, other: object, comparator: Callable[[T, Any], bool]) -> bool:
        if not isinstance(other, Option):
            return False
        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none()
        return bool(comparator(self._state.value, other._state.value))  # type: ignore[attr-defined]


def Some(value: T) -> Option[T]:
    return Option.some(value)


def Nothing() -> Option[Any]:
    return Option.none()


def from_nullable(value: Optional[T]) -> Option[T]:
    return Option.from_nullable(value)
