"""Public interface for the associative set collection."""

import logging

from ._errors import SetError, SetEmptyError
from ._set import (
    EMPTY,
    Empty,
    FilterFunc,
    MapFunc,
    Set,
    new_with_values,
    new_without_values,
)
from ._functional import (
    MapFreeFunc,
    MapToListFunc,
    ReduceFunc,
    map_free,
    map_to_list,
    reduce,
)
from ._random import RandomConfig, build_rng, get_shared_rng, reset_shared_rng

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # --- Set type and constructors ---
    "Set",
    "new_with_values",
    "new_without_values",
    "Empty",
    "EMPTY",
    # --- Free functions ---
    "map_free",
    "map_to_list",
    "reduce",
    # --- Callback signatures ---
    "FilterFunc",
    "MapFunc",
    "MapFreeFunc",
    "MapToListFunc",
    "ReduceFunc",
    # --- Errors ---
    "SetError",
    "SetEmptyError",
    # --- Random source configuration ---
    "RandomConfig",
    "build_rng",
    "get_shared_rng",
    "reset_shared_rng",
]
