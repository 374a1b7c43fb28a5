"""Random sources used for picking set elements.

By default every set draws from a process-wide ``secrets.SystemRandom``
instance, i.e. the operating system's cryptographic generator.  For
reproducible simulations the shared source can be switched to a seeded
``random.Random`` through the environment (or a ``.env`` file):

ASSOCSET_RANDOM_SOURCE
    ``system`` (default) or ``pseudo``.
ASSOCSET_RANDOM_SEED
    Integer seed, only honoured by the ``pseudo`` source.

Individual sets can also be handed their own generator via the ``rng``
argument of the constructors, which bypasses the shared one entirely.
"""

from __future__ import annotations

import logging
import os
import random
import secrets
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

__all__: list[str] = [
    "RandomConfig",
    "build_rng",
    "get_shared_rng",
    "reset_shared_rng",
    "rand_index",
]

SYSTEM = "system"
PSEUDO = "pseudo"

_SOURCES = (SYSTEM, PSEUDO)


@dataclass(slots=True)
class RandomConfig:
    """Which generator backs random element selection."""

    source: str = SYSTEM
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.source = self.source.strip().lower()
        if self.source not in _SOURCES:
            raise ValueError(
                f"Unknown random source {self.source!r}; expected one of {', '.join(_SOURCES)}"
            )

    @classmethod
    def from_env(cls, prefix: str = "ASSOCSET") -> "RandomConfig":
        """Create config from environment variables with the given *prefix*.

        A ``.env`` file is looked up from the current working directory
        upwards; variables already present in the environment win.
        """
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        seed_env = os.getenv(f"{prefix}_RANDOM_SEED")
        return cls(
            source=os.getenv(f"{prefix}_RANDOM_SOURCE", SYSTEM),
            seed=int(seed_env) if seed_env not in (None, "") else None,
        )


def build_rng(config: RandomConfig) -> random.Random:
    """Return a fresh generator for *config*."""
    if config.source == PSEUDO:
        logger.debug(f"Using pseudo-random source (seed={config.seed})")
        return random.Random(config.seed)
    if config.seed is not None:
        logger.debug("Ignoring random seed for the system source")
    logger.debug("Using cryptographic system random source")
    return secrets.SystemRandom()


# Module-level singleton ----------------------------------------------------

_shared_rng: Optional[random.Random] = None


def get_shared_rng() -> random.Random:  # noqa: D401
    """Return the process-wide random source, creating it on first use."""
    global _shared_rng  # pylint: disable=global-statement
    if _shared_rng is None:
        _shared_rng = build_rng(RandomConfig.from_env())
    return _shared_rng


def reset_shared_rng() -> None:
    """Forget the shared source so the next access re-reads the environment."""
    global _shared_rng  # pylint: disable=global-statement
    _shared_rng = None


def rand_index(size: int, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly random index in ``[0, size)``, or ``-1`` if *size* is 0."""
    if size <= 0:
        return -1
    if rng is None:
        rng = get_shared_rng()
    return rng.randrange(size)
