from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")

ExpectError = Union[BaseException, type, str]


def _raise_expected(error: ExpectError) -> Any:
    if isinstance(error, str):
        raise UnwrapError(error, operation="expect")
    raise error


class OptionState(Generic[T]):
    """One of the two states an Option can be in."""

    def is_present(self) -> bool: raise NotImplementedError
    def is_absent(self) -> bool: return not self.is_present()

    def unwrap(self) -> T: raise NotImplementedError
    def expect(self, error: ExpectError) -> T: raise NotImplementedError
    def unwrap_or(self, default: T) -> T: raise NotImplementedError
    def unwrap_or_else(self, fn: Callable[[], T]) -> T: raise NotImplementedError


@dataclass(frozen=True)
class Present(OptionState[T]):
    value: T
    def is_present(self) -> bool: return True

    def unwrap(self) -> T: return self.value
    def expect(self, error: ExpectError) -> T: return self.value
    def unwrap_or(self, default: T) -> T: return self.value
    def unwrap_or_else(self, fn: Callable[[], T]) -> T: return self.value


@dataclass(frozen=True)
class Absent(OptionState[Any]):
    def is_present(self) -> bool: return False

    def unwrap(self) -> Any: raise UnwrapError()
    def expect(self, error: ExpectError) -> Any: return _raise_expected(error)
    def unwrap_or(self, default: U) -> U: return default
    def unwrap_or_else(self, fn: Callable[[], U]) -> U: return fn()


ABSENT: OptionState[Any] = Absent()
