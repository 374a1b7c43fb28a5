"""Exceptions raised by :mod:`assocset`."""

from __future__ import annotations

__all__: list[str] = ["SetError", "SetEmptyError"]


class SetError(Exception):
    """Base class for all errors raised by this package."""


class SetEmptyError(SetError, LookupError):
    """Raised when an element is requested from a set that has none."""

    def __init__(self, message: str = "cannot get a random element from set, set is empty") -> None:
        super().__init__(message)
