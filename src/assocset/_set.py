from __future__ import annotations

"""Set of unique elements with optional associated values.

A :class:`Set` is a thin wrapper around a ``dict`` mapping each element
(type ``T``) to an associated value (type ``V``).  The values are payload
only: identity, membership and every set-algebra operation look at the
elements alone.  Sets that only need membership use the :data:`EMPTY`
marker as their value so that storage stays a plain mapping.

Design notes
============
1. Algebra and functional operations never touch their operands; they
   return a **new** set which inherits the receiver's default value and
   random source.
2. ``None`` stands for an absent operand.  It behaves like the empty set
   everywhere except :meth:`Set.equals`, which rejects it.
3. Iteration order is whatever the backing ``dict`` yields.  Callers must
   not rely on it.
4. Instances are **not** thread-safe.  Concurrent mutation requires
   external locking by the caller.
"""

import itertools
import logging
import random
from types import MappingProxyType
from typing import Any, Callable, Generic, Hashable, Iterator, Mapping, Optional, TypeVar

from ._errors import SetEmptyError
from ._random import rand_index

logger = logging.getLogger(__name__)

__all__: list[str] = [
    "Empty",
    "EMPTY",
    "Set",
    "FilterFunc",
    "MapFunc",
    "new_with_values",
    "new_without_values",
]

T = TypeVar("T", bound=Hashable)
V = TypeVar("V")

FilterFunc = Callable[[T, V], bool]
MapFunc = Callable[[T, V], tuple[T, V]]


class Empty:
    """Unit value stored for sets that only track membership."""

    __slots__ = ()
    _instance: Optional["Empty"] = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __str__(self) -> str:
        return "{}"

    def __reduce__(self):
        return (Empty, ())


EMPTY = Empty()


class Set(Generic[T, V]):
    """Collection of unique elements, each optionally carrying a value.

    Parameters
    ----------
    default:
        Value stored by :meth:`add_without_value`.  ``None`` unless the set
        was created through :func:`new_without_values`.
    rng:
        Generator used by :meth:`one_r`.  When *None* the process-wide
        source from :func:`assocset.get_shared_rng` is used.

    ``Set()`` is a valid empty set.  Re-adding an element overwrites its
    value.  Not safe for concurrent mutation from several threads.
    """

    __slots__ = ("_elements", "_default", "_rng")

    def __init__(self, default: Any = None, *, rng: Optional[random.Random] = None) -> None:
        self._elements: dict[T, V] = {}
        self._default = default
        self._rng = rng

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _new(self) -> "Set[T, V]":
        """Empty set sharing this set's default value and random source."""
        return Set(self._default, rng=self._rng)

    def _rand_index(self) -> int:
        return rand_index(len(self._elements), self._rng)

    @property
    def elements(self) -> Mapping[T, V]:
        """Read-only live view of the element -> value storage."""
        return MappingProxyType(self._elements)

    @property
    def default(self) -> Any:
        return self._default

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_with_value(self, element: T, value: V) -> None:
        """Add *element* with *value*, overwriting the value if present."""
        self._elements[element] = value

    def add_without_value(self, element: T) -> None:
        """Add *element* with this set's default value."""
        self._elements[element] = self._default

    def remove(self, element: T) -> None:
        """Remove *element*; nothing happens if it is absent."""
        self._elements.pop(element, None)

    def add_all(self, other: Optional["Set[T, V]"]) -> None:
        """Add every element of *other* with its value.

        Values from *other* win on conflict.  ``None`` is a no-op.
        """
        if other is None:
            return
        self._elements.update(other._elements)

    def remove_all(self, other: Optional["Set[T, V]"]) -> None:
        """Remove every element of *other* from this set.  ``None`` is a no-op."""
        if other is None:
            return
        for element in list(other._elements):
            self._elements.pop(element, None)

    def clear(self) -> None:
        self._elements.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._elements)

    def to_list(self) -> list[T]:
        """Return an independent list of the elements (values excluded)."""
        return list(self._elements)

    def contains(self, element: T) -> bool:
        """Membership test; the associated value is not considered."""
        return element in self._elements

    def equals(self, other: "Set[T, V]") -> bool:
        """True if both sets hold the same elements, ignoring values.

        *other* must be a set; ``None`` or any other type raises ``TypeError``.
        """
        if not isinstance(other, Set):
            raise TypeError(f"cannot compare a set with {type(other).__name__}")
        if len(self._elements) != len(other._elements):
            return False
        return all(element in other._elements for element in self._elements)

    def is_subset(self, other: Optional["Set[T, V]"]) -> bool:
        """True if every element of this set is in *other*.

        ``None`` counts as the empty set: only an empty set is a subset of it.
        """
        if other is None:
            return not self._elements
        if not isinstance(other, Set):
            raise TypeError(f"cannot test a set against {type(other).__name__}")
        if len(self._elements) > len(other._elements):
            return False
        return all(element in other._elements for element in self._elements)

    def string_with_values(self) -> str:
        """Render as ``elem (value), elem (value), ...``; empty string if empty."""
        return ", ".join(f"{element} ({value})" for element, value in self._elements.items())

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------

    def copy(self) -> "Set[T, V]":
        new_set = self._new()
        new_set.add_all(self)
        return new_set

    def intersect(self, other: Optional["Set[T, V]"]) -> "Set[T, V]":
        """Elements present in both sets, with the values taken from *other*."""
        new_set = self._new()
        if other is None:
            return new_set
        for element, value in other._elements.items():
            if element in self._elements:
                new_set._elements[element] = value
        return new_set

    def unite(self, other: Optional["Set[T, V]"]) -> "Set[T, V]":
        """Elements of both sets; *other*'s value wins for shared elements."""
        new_set = self.copy()
        new_set.add_all(other)
        return new_set

    def unite_disjunctively(self, other: Optional["Set[T, V]"]) -> "Set[T, V]":
        """Symmetric difference; each element keeps the value from its own set."""
        if other is None:
            return self.copy()
        new_set = self.subtract(other)
        for element, value in other._elements.items():
            if element not in self._elements:
                new_set._elements[element] = value
        return new_set

    def subtract(self, other: Optional["Set[T, V]"]) -> "Set[T, V]":
        """Elements of this set absent from *other*, keeping this set's values."""
        if other is None:
            return self.copy()
        new_set = self._new()
        for element, value in self._elements.items():
            if element not in other._elements:
                new_set._elements[element] = value
        return new_set

    # ------------------------------------------------------------------
    # Functional operations
    # ------------------------------------------------------------------

    def filter(self, predicate: Optional[FilterFunc[T, V]]) -> "Set[T, V]":
        """Entries for which ``predicate(element, value)`` holds.

        A ``None`` predicate keeps everything and returns a copy.
        """
        if predicate is None:
            return self.copy()
        new_set = self._new()
        for element, value in self._elements.items():
            if predicate(element, value):
                new_set._elements[element] = value
        return new_set

    def map(self, func: Optional[MapFunc[T, V]]) -> "Set[T, V]":
        """Apply ``func(element, value) -> (element, value)`` to every entry.

        If two entries map to the same element, the one iterated later
        overwrites the earlier one; since iteration order is unspecified
        the surviving value is too.  A ``None`` *func* returns a copy.
        """
        if func is None:
            return self.copy()
        new_set = self._new()
        for element, value in self._elements.items():
            new_element, new_value = func(element, value)
            new_set._elements[new_element] = new_value
        return new_set

    # ------------------------------------------------------------------
    # Random selection
    # ------------------------------------------------------------------

    def one_r(self) -> tuple[T, V]:
        """Return one uniformly random ``(element, value)`` pair.

        The index is drawn first, then the entries are walked up to it,
        which costs O(n).  Raises :class:`SetEmptyError` if the set is empty.
        """
        index = self._rand_index()
        if index < 0:
            logger.debug("Random pick requested from an empty set")
            raise SetEmptyError()
        return next(itertools.islice(self._elements.items(), index, None))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Comma separated elements without values; empty string if empty."""
        return ", ".join(str(element) for element in self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({{{self.string_with_values()}}})"


def new_with_values(default: Any = None, *, rng: Optional[random.Random] = None) -> Set[Any, Any]:
    """Create an empty set whose elements carry values (like a dict)."""
    return Set(default, rng=rng)


def new_without_values(*, rng: Optional[random.Random] = None) -> Set[Any, Empty]:
    """Create an empty set of bare elements (like a set of labels)."""
    return Set(EMPTY, rng=rng)
