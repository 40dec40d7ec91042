"""
Implementation of Either, the result type of fallible set operations.

Left carries the failure, Right carries the value. Set.remove returns
Left(ElementNotFound) when some element was missing and Right(the set)
otherwise, so several removals can be chained with >>.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TypeVar

from .functor import Functor

L = TypeVar("L")
R = TypeVar("R")
S = TypeVar("S")
T = TypeVar("T")


@dataclass(frozen=True)
class Left[L](Functor):
    """
    Represents a left (failed) value in an Either type.
    """
    l: L

    def map(self, f: Callable[[R], S]) -> Left[L]:
        return self

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Left[L]:
        """A failure short-circuits the rest of the chain."""
        return self

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def __repr__(self):
        """String representation of the Left."""
        return f"Left({self.l!r})"


@dataclass(frozen=True)
class Right[R](Functor[R]):
    """
    Represents a right (successful) value in an Either type.
    """
    r: R

    def map(self, f: Callable[[R], S]) -> Right[S]:
        return Right(f(self.r))

    def __rshift__(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        """
        Chains computations by passing the value inside Right to function m.
        """
        return m(self.r)

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def __repr__(self):
        """String representation of the Right."""
        return f"Right({self.r!r})"


type Either[L, R] = Left[L] | Right[R]


def either(on_left: Callable[[L], T], on_right: Callable[[R], T],
           e: Either[L, R]) -> T:
    """Folds an Either into a single value by handling both cases."""
    match e:
        case Left(err):
            return on_left(err)
        case Right(value):
            return on_right(value)
    raise TypeError(f"Expected Left or Right, got {type(e).__name__}")
