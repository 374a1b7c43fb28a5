import random
import secrets

import numpy as np
import pytest

import assocset
from assocset import RandomConfig, SetEmptyError, SetError, build_rng, new_with_values, new_without_values
from assocset._random import rand_index


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def test_default_config_is_system():
    config = RandomConfig.from_env()

    assert config.source == "system"
    assert config.seed is None
    assert isinstance(build_rng(config), secrets.SystemRandom)


def test_pseudo_source_from_env(monkeypatch):
    monkeypatch.setenv("ASSOCSET_RANDOM_SOURCE", "Pseudo")
    monkeypatch.setenv("ASSOCSET_RANDOM_SEED", "42")

    config = RandomConfig.from_env()
    assert config == RandomConfig(source="pseudo", seed=42)

    first = [build_rng(config).randrange(1000) for _ in range(3)]
    second = [build_rng(config).randrange(1000) for _ in range(3)]
    assert first == second


def test_custom_prefix(monkeypatch):
    monkeypatch.setenv("MYAPP_RANDOM_SOURCE", "pseudo")
    assert RandomConfig.from_env(prefix="MYAPP").source == "pseudo"


def test_unknown_source_is_rejected():
    with pytest.raises(ValueError):
        RandomConfig(source="dice")


def test_shared_rng_is_singleton_and_resettable(monkeypatch):
    first = assocset.get_shared_rng()
    assert assocset.get_shared_rng() is first
    assert isinstance(first, secrets.SystemRandom)

    monkeypatch.setenv("ASSOCSET_RANDOM_SOURCE", "pseudo")
    assert assocset.get_shared_rng() is first

    assocset.reset_shared_rng()
    refreshed = assocset.get_shared_rng()
    assert refreshed is not first
    assert not isinstance(refreshed, secrets.SystemRandom)


# ---------------------------------------------------------------------------
# Random index
# ---------------------------------------------------------------------------


def test_rand_index_of_empty_set_is_negative():
    assert rand_index(0) == -1
    assert new_without_values()._rand_index() == -1


def test_rand_index_stays_in_range(seeded_rng):
    size = 7
    indices = [rand_index(size, seeded_rng) for _ in range(1000)]

    assert min(indices) >= 0
    assert max(indices) <= size - 1


# ---------------------------------------------------------------------------
# one_r
# ---------------------------------------------------------------------------


def test_one_r_on_empty_set_raises():
    s = new_without_values()

    with pytest.raises(SetEmptyError) as excinfo:
        s.one_r()

    assert isinstance(excinfo.value, SetError)
    assert isinstance(excinfo.value, LookupError)
    assert str(excinfo.value) == "cannot get a random element from set, set is empty"


def test_one_r_returns_member_and_its_value(fruits):
    for _ in range(50):
        elem, value = fruits.one_r()
        assert fruits.contains(elem)
        assert fruits.elements[elem] == value


def test_one_r_single_element():
    s = new_without_values()
    s.add_without_value("apple")

    assert s.one_r() == ("apple", assocset.EMPTY)


def test_one_r_uses_given_rng(fruits):
    s1 = new_with_values(rng=random.Random(99))
    s2 = new_with_values(rng=random.Random(99))
    s1.add_all(fruits)
    s2.add_all(fruits)

    assert [s1.one_r() for _ in range(20)] == [s2.one_r() for _ in range(20)]


# Unseeded system source: loose bound. Seeded source: 0.9999 quantile.
@pytest.mark.parametrize(
    "rng, max_chi_square",
    [(None, 60.0), (random.Random(2024), 33.72)],
    ids=["system", "pseudo"],
)
def test_one_r_is_uniform(rng, max_chi_square):
    size = 10
    trials = 20_000
    s = new_with_values(rng=rng)
    for i in range(size):
        s.add_with_value(f"elem-{i}", i)

    picks = np.array([s.one_r()[1] for _ in range(trials)])
    counts = np.bincount(picks, minlength=size)
    expected = trials / size

    # Pearson chi-square with 9 degrees of freedom.
    chi_square = float(((counts - expected) ** 2 / expected).sum())
    assert chi_square < max_chi_square
    assert np.all(np.abs(counts / trials - 1 / size) < 0.02)
