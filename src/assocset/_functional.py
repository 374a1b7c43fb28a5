"""Free functions over :class:`~assocset.Set`.

These are not methods because their results change type: ``map_free``
returns a plain ``dict`` with new key/value types, ``map_to_list`` a list
and ``reduce`` an arbitrary accumulator.  Entries are visited in the
set's iteration order, which is unspecified.
"""

from __future__ import annotations

from typing import Callable, Hashable, Optional, TypeVar

from ._set import Set

__all__: list[str] = [
    "MapFreeFunc",
    "MapToListFunc",
    "ReduceFunc",
    "map_free",
    "map_to_list",
    "reduce",
]

T = TypeVar("T", bound=Hashable)
V = TypeVar("V")
TOut = TypeVar("TOut", bound=Hashable)
VOut = TypeVar("VOut")
EOut = TypeVar("EOut")
Acc = TypeVar("Acc")

MapFreeFunc = Callable[[T, V], tuple[TOut, VOut]]
MapToListFunc = Callable[[T, V], EOut]
ReduceFunc = Callable[[T, V, Acc], Acc]


def map_free(
    set_: Set[T, V], func: Optional[MapFreeFunc[T, V, TOut, VOut]]
) -> dict[TOut, VOut]:
    """Build a new ``dict`` from ``func(element, value) -> (key, value)``.

    Colliding keys overwrite each other in iteration order.  A ``None``
    *func* yields an empty dict.
    """
    if func is None:
        return {}
    result: dict[TOut, VOut] = {}
    for element, value in set_.elements.items():
        new_key, new_value = func(element, value)
        result[new_key] = new_value
    return result


def map_to_list(set_: Set[T, V], func: Optional[MapToListFunc[T, V, EOut]]) -> list[EOut]:
    """One ``func(element, value)`` result per entry; ``None`` yields ``[]``."""
    if func is None:
        return []
    return [func(element, value) for element, value in set_.elements.items()]


def reduce(set_: Set[T, V], func: Optional[ReduceFunc[T, V, Acc]], initial: Acc) -> Acc:
    """Fold ``func(element, value, acc)`` over the entries starting at *initial*.

    With a ``None`` *func* the *initial* value is returned unchanged.
    """
    if func is None:
        return initial
    acc = initial
    for element, value in set_.elements.items():
        acc = func(element, value, acc)
    return acc
