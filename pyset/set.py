"""Implements a mutable, generic Set type with set-algebra operations."""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from functools import reduce
from itertools import chain
from typing import Callable, TypeVar

from .config import DEFAULT_SETTINGS, SetSettings
from .either import Either, Left, Right
from .errors import ElementNotFound, ElementTypeError
from .functor import Functor
from .maybe import Just, Maybe, Nothing

logger = logging.getLogger(__name__)

B = TypeVar("B")
C = TypeVar("C")


class Set[T](Functor[T]):
    """
    A collection of distinct values sharing one element type, backed by a
    Python set.

    The element type is taken from `element_type` or, failing that, from the
    first element ever inserted. Inserting a value of another type raises
    ElementTypeError before anything is stored. The check uses isinstance, so
    the first value decides what else fits: Set([1, True]) holds {1} because
    bool is a subclass of int, while Set([True, 1]) raises. Iteration order
    is the hash table's order and must not be relied on.
    """

    def __init__(self, elements: Iterable[T] = (),
                 element_type: type[T] | None = None,
                 settings: SetSettings | None = None):
        self.data: set[T] = set()
        self.element_type: type[T] | None = element_type
        self.settings: SetSettings = \
            DEFAULT_SETTINGS if settings is None else settings
        self._insert(elements)

    @classmethod
    def make(cls, elements: Iterable[T]) -> Set[T]:
        """Creates a Set holding the distinct values of elements."""
        return cls(elements)

    @classmethod
    def empty(cls, element_type: type[T] | None = None) -> Set[T]:
        """Creates an empty Set, optionally with its element type fixed."""
        return cls((), element_type)

    def _derive(self, data: set[T]) -> Set[T]:
        """New Set with the given table and this Set's type and settings."""
        derived: Set[T] = Set((), self.element_type, self.settings)
        derived.data = data
        return derived

    def _insert(self, elements: Iterable[T]) -> None:
        """
        Adds a batch of values. The whole batch is checked first, so a
        rejected batch leaves the Set untouched.
        """
        batch = list(elements)
        if not batch:
            return
        expected = self.element_type or type(batch[0])
        if self.settings.check_types:
            for value in batch:
                if not isinstance(value, expected):
                    raise ElementTypeError(expected, value)
        staged = set(batch)
        self.data |= staged
        if self.element_type is None:
            self.element_type = expected
            logger.debug("Set bound to element type %s", expected.__name__)

    def __iter__(self) -> Iterator[T]:
        """Iterates over the elements of the Set."""
        return iter(self.data)

    def __len__(self) -> int:
        """Returns the number of distinct elements in the Set."""
        return len(self.data)

    def __contains__(self, item: object) -> bool:
        """Allows use of `item in my_set`."""
        return item in self.data

    @property
    def length(self) -> int:
        """Returns the number of distinct elements in the Set."""
        return len(self.data)

    def member(self, item: T) -> bool:
        """Returns True if the item exists in the Set."""
        return item in self.data

    def get_type(self) -> Maybe[type[T]]:
        """
        Returns the recorded element type, or Nothing if the Set was created
        empty without one and nothing has been inserted yet.
        """
        if self.element_type is None:
            return Nothing
        return Just(self.element_type)

    def append(self, elements: Iterable[T]) -> None:
        """Inserts every value of an iterable of the Set's element type."""
        self._insert(elements)

    def add(self, *elements: T) -> None:
        """Inserts one or more individual values."""
        self._insert(elements)

    def update(self, *others: Set[T]) -> None:
        """Inserts every element of each of the other Sets into this one."""
        self._insert(chain.from_iterable(other.data for other in others))

    def remove(self, *elements: T) -> Either[ElementNotFound, Set[T]]:
        """
        Deletes each given value that is present.

        Returns Left(ElementNotFound) naming the values that were absent.
        Values that were present are removed regardless, so a Left does
        not mean the Set is unchanged.
        """
        missing: list[T] = []
        for value in elements:
            if value in self.data:
                self.data.remove(value)
            else:
                missing.append(value)
        if missing:
            logger.debug("remove: %d of %d elements not found",
                         len(missing), len(elements))
            return Left(ElementNotFound(tuple(missing)))
        return Right(self)

    def clear(self) -> None:
        """Removes all elements; the element type is kept."""
        self.data.clear()

    def to_slice(self) -> list[T]:
        """Returns the elements in a new list, in no particular order."""
        return list(self.data)

    def copy(self) -> Set[T]:
        """Returns an independent copy of the Set."""
        return copy(self)

    def union(self, *others: Set[T]) -> Set[T]:
        return union(self, *others)

    def intersection(self, *others: Set[T]) -> Set[T]:
        return intersection(self, *others)

    def difference(self, *others: Set[T]) -> Set[T]:
        return difference(self, *others)

    def __or__(self, other: Set[T]) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return union(self, other)

    def __and__(self, other: Set[T]) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return intersection(self, other)

    def __sub__(self, other: Set[T]) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return difference(self, other)

    def map(self, f: Callable[[T], B]) -> Set[B]:
        """
        Returns a new Set of f applied to every element.
        The element type is inferred from the results; distinct elements
        may map to the same value, so the result can be smaller.
        """
        return Set((f(x) for x in self.data), settings=self.settings)

    def filter(self, predicate: Callable[[T], bool]) -> Set[T]:
        """Returns a new Set of the elements that satisfy the predicate."""
        return self._derive({x for x in self.data if predicate(x)})

    def foldl(self, f: Callable[[C, T], C], acc: C) -> C:
        """
        Left fold over the Set. The order in which elements reach f is
        unspecified, so f should be commutative in practice.
        """
        return reduce(f, self.data, acc)

    def __repr__(self) -> str:
        """String representation of the Set."""
        return f"Set({self.data})"

    def __eq__(self, other) -> bool:
        """Two Sets are equal when they hold the same elements."""
        if not isinstance(other, Set):
            return NotImplemented
        return self.data == other.data

    __hash__ = None  # type: ignore[assignment]


def copy[T](s: Set[T]) -> Set[T]:
    """Returns a new Set with its own table, holding the elements of s."""
    return s._derive(set(s.data))  # pylint: disable=W0212


def union[T](s1: Set[T], *others: Set[T]) -> Set[T]:
    """Returns a new Set of the elements found in s1 or any of the others."""
    result = copy(s1)
    result.update(*others)
    logger.debug("union of %d sets has %d elements", len(others) + 1, len(result))
    return result


def intersection[T](s1: Set[T], *others: Set[T]) -> Set[T]:
    """
    Returns a new Set of the elements of s1 present in every one of others.

    An element is kept when the number of others containing it equals the
    number of others given. With no others there is nothing to be present
    in, and the result is empty rather than a copy of s1.
    """
    if not others:
        return s1._derive(set())  # pylint: disable=W0212
    counts: Counter[T] = Counter()
    for other in others:
        for key in other.data:
            if key in s1.data:
                counts[key] += 1
    required = len(others)
    result = s1._derive(  # pylint: disable=W0212
        {key for key in s1.data if counts[key] == required})
    logger.debug("intersection of %d sets has %d elements", required + 1, len(result))
    return result


def difference[T](s1: Set[T], *others: Set[T]) -> Set[T]:
    """Returns a new Set of the elements of s1 found in none of the others."""
    result = copy(s1)
    for other in others:
        result.data.difference_update(other.data)
    logger.debug("difference of %d sets has %d elements", len(others) + 1, len(result))
    return result
