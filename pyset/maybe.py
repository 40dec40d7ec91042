""" Implementation of Maybe in Python."""
from abc import ABCMeta
from dataclasses import dataclass
from enum import Enum, EnumMeta
from typing import Callable, TypeVar

from .functor import Functor

A = TypeVar("A")
B = TypeVar("B")


class NothingMaybeMeta(ABCMeta, EnumMeta):
    pass


class _Nothing(Functor, Enum, metaclass=NothingMaybeMeta):
    NOTHING = "Nothing"

    def map(self, f: Callable[[A], B]) -> "_Nothing":
        return Nothing

    def __rshift__(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return Nothing

    def __repr__(self):
        """String representation of Nothing."""
        return "Nothing"

    def __eq__(self, other) -> bool:
        """Equality check for Nothing."""
        return isinstance(other, _Nothing)

    def __hash__(self):
        return hash(self.value)

# singleton instance
Nothing: _Nothing = _Nothing.NOTHING


@dataclass(frozen=True)
class Just[A](Functor[A]):
    """Holds a value that is known to be present."""
    a: A

    def map(self, f: Callable[[A], B]) -> "Just[B]":
        return Just(f(self.a))

    def __rshift__(self, m: Callable[[A], "Maybe[B]"]) -> "Maybe[B]":
        """Chains computations by passing the value inside Just to function m."""
        return m(self.a)

    def __repr__(self):
        """String representation of the Just."""
        return f"Just({self.a!r})"


type Maybe[A] = Just[A] | _Nothing


def from_maybe(default: A, m: Maybe[A]) -> A:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default
