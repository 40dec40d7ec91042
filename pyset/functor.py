""" Abstract base class for Functor """
from abc import ABC, abstractmethod
from typing import Callable, Self, TypeVar

# pylint:disable=C0105
A = TypeVar('A', covariant=True)
B = TypeVar('B', covariant=True)


class Functor[A](ABC):
    """Base class for containers whose elements can be mapped over.

    Subclasses implement map. The & operator is sugar for it, so
    `f & container` reads as "f mapped over container".
    """

    def __rand__(self, other: Callable[[A], B]) -> "Functor[B]":
        """Defines the right-hand side of the map operation."""
        return map(other, self)

    @abstractmethod
    def map(self: Self, f: Callable[[A], B]) -> "Functor[B]":
        """Applies a function to every value inside the Functor."""


def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the values inside the functor
    'f' using its map method."""
    return f.map(fn)
