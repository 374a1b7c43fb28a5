# in tests/conftest.py

import random

import pytest

import assocset
from assocset import Set, new_with_values


@pytest.fixture(autouse=True)
def isolated_random_env(monkeypatch):
    """
    Pytest fixture that removes any random source configuration from the
    environment and drops the shared generator before and after each test,
    so that tests never leak a seeded source into each other.
    """
    monkeypatch.delenv("ASSOCSET_RANDOM_SOURCE", raising=False)
    monkeypatch.delenv("ASSOCSET_RANDOM_SEED", raising=False)
    assocset.reset_shared_rng()
    yield
    assocset.reset_shared_rng()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic generator for tests that need reproducible picks."""
    return random.Random(1234)


@pytest.fixture
def fruits() -> Set[str, str]:
    s = new_with_values()
    s.add_with_value("apple", "red")
    s.add_with_value("banana", "yellow")
    s.add_with_value("cherry", "dark red")
    s.add_with_value("brick", "red")
    return s


@pytest.fixture
def other_fruits() -> Set[str, str]:
    s = new_with_values()
    s.add_with_value("apple", "green")
    s.add_with_value("banana", "brownish")
    s.add_with_value("mango", "green-orange")
    return s
