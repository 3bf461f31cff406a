"""Finite outcome spaces.

A distribution only needs a handful of set capabilities from its domain:
adding elements, membership, iteration, cardinality, union and
equivalence.  :class:`OutcomeSpace` names that contract; two concrete
spaces implement it:

* :class:`HashSpace` – hash based, iterates in insertion order.
* :class:`SortedSpace` – kept sorted with :mod:`bisect`, iterates in
  ascending order.  Elements must be mutually orderable.
"""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, Iterator, List


class OutcomeSpace(ABC):
    """Abstract finite set of outcomes."""

    @abstractmethod
    def add(self, element: Hashable) -> None:
        """Insert *element*; inserting an existing element is a no-op."""

    @abstractmethod
    def __contains__(self, element: object) -> bool:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def contains(self, element: object) -> bool:
        """Membership test."""
        return element in self

    def cardinality(self) -> int:
        """Number of elements in the space."""
        return len(self)

    def elements(self) -> List[Any]:
        """Snapshot of the elements in iteration order."""
        return list(self)

    def union(self, other: Iterable[Any]) -> "OutcomeSpace":
        """Return a new space of this type holding both element sets."""
        return union(self, other)

    def equivalent(self, other: "OutcomeSpace") -> bool:
        """True iff both spaces hold exactly the same elements."""
        return equivalent(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.elements()!r})"


class HashSpace(OutcomeSpace):
    """Hash-based outcome space.

    Parameters
    ----------
    elements : iterable, optional
        Initial elements.  Duplicates collapse; iteration follows first
        insertion.
    """

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        # dict keys keep insertion order, unlike set
        self._elements: Dict[Hashable, None] = dict.fromkeys(elements)

    def add(self, element: Hashable) -> None:
        self._elements[element] = None

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._elements
        except TypeError:
            # unhashable values can never be members
            return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)


class SortedSpace(OutcomeSpace):
    """Outcome space kept in ascending order.

    Parameters
    ----------
    elements : iterable, optional
        Initial elements; must support ``<`` against each other.
    """

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._points: List[Any] = sorted(set(elements))

    def add(self, element: Any) -> None:
        index = bisect.bisect_left(self._points, element)
        if index < len(self._points) and self._points[index] == element:
            return
        self._points.insert(index, element)

    def __contains__(self, element: object) -> bool:
        try:
            index = bisect.bisect_left(self._points, element)
        except TypeError:
            return False
        return index < len(self._points) and self._points[index] == element

    def __iter__(self) -> Iterator[Any]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)


def as_space(elements: Iterable[Any]) -> OutcomeSpace:
    """Return *elements* as an :class:`OutcomeSpace`.

    Spaces are returned unchanged (no copy); any other iterable is
    wrapped in a :class:`HashSpace`.
    """
    if isinstance(elements, OutcomeSpace):
        return elements
    return HashSpace(elements)


def union(a: OutcomeSpace, b: Iterable[Any]) -> OutcomeSpace:
    """Return a new space, of the same type as *a*, containing ``a ∪ b``."""
    result = type(a)(a)
    for element in b:
        result.add(element)
    return result


def equivalent(a: OutcomeSpace, b: OutcomeSpace) -> bool:
    """Set equality: same cardinality and every element of *a* is in *b*."""
    if len(a) != len(b):
        return False
    return all(element in b for element in a)
