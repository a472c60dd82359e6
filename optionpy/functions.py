"""Free helpers expressed through the public Option API, plus the callable
type aliases used across the library."""
from __future__ import annotations
from typing import Any, Callable, Tuple, TypeVar, overload

from .option import Nothing, Option, Some

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

Transformation = Callable[[A], B]
Predicate = Callable[[A], bool]
Generator = Callable[[], A]
GenerateOption = Callable[[], Option[A]]
ZipTransformation = Callable[[A, B], C]
TransformToOption = Callable[[A], Option[B]]
OptionDuo = Tuple[Option[A], Option[B]]


@overload
def flatten(opt: Option[Option[A]]) -> Option[A]: ...
@overload
def flatten(opt: Option[A]) -> Option[A]: ...
def flatten(opt: Option[Any]) -> Option[Any]:
    """Remove one level of Option nesting. Same behavior as ``Option.flatten``."""
    return opt.flatten()


def unzip(opt: Option[Tuple[A, B]]) -> OptionDuo[A, B]:
    def split(pair: Tuple[A, B]) -> OptionDuo[A, B]:
        a, b = pair
        return Some(a), Some(b)
    return opt.map(split).unwrap_or_else(lambda: (Nothing(), Nothing()))
