from __future__ import annotations

"""Walk-through of the :mod:`assocset` API using two sets of fruit colours.

Workflow:
1. Build two sets of fruits with colours as associated values.
2. Remove an element, intersect the sets, filter and map the first one.
3. Run the free functions (``map_free``, ``map_to_list``, ``reduce``).
4. Compare the sets, pick a random fruit and finally clear a set.

The random source can be switched via ``ASSOCSET_RANDOM_SOURCE`` /
``ASSOCSET_RANDOM_SEED`` in the environment or a ``.env`` file.
"""

import logging
import random
from typing import Optional

from dotenv import load_dotenv

from assocset import Set, map_free, map_to_list, new_with_values, reduce

logger = logging.getLogger(__name__)


def build_fruit_sets(rng: Optional[random.Random] = None) -> tuple[Set[str, str], Set[str, str]]:
    """Return the two example sets."""
    set1: Set[str, str] = new_with_values(rng=rng)
    set1.add_with_value("apple", "red")
    set1.add_with_value("banana", "yellow")
    set1.add_with_value("cherry", "dark red")
    set1.add_with_value("brick", "red")

    set2: Set[str, str] = new_with_values(rng=rng)
    set2.add_with_value("apple", "green")
    set2.add_with_value("banana", "brownish")
    set2.add_with_value("mango", "green-orange")
    set2.add_with_value("brick", "red")

    set2.remove("brick")
    return set1, set2


def example(rng: Optional[random.Random] = None) -> list[str]:
    """Run the walk-through and return one rendered line per result."""
    set1, set2 = build_fruit_sets(rng)

    intersected = set1.intersect(set2)
    filtered = set1.filter(lambda elem, value: "c" in elem)
    mapped = set1.map(lambda elem, value: (elem.upper(), f"color: {value.upper()}"))
    colours = map_free(set1, lambda elem, value: (value, elem))
    lengths = map_to_list(set1, lambda elem, value: len(elem))
    total = reduce(set1, lambda elem, value, acc: acc + len(value), 0)
    rnd_elem, rnd_value = set1.one_r()

    results = [
        str(dict(intersected.elements)),       # {'apple': 'green', 'banana': 'brownish'}
        str(intersected.size()),               # 2
        str(intersected.contains("banana")),   # True
        str(intersected.to_list()),            # ['apple', 'banana']
        str(intersected),                      # apple, banana
        intersected.string_with_values(),      # apple (green), banana (brownish)
        str(set1.equals(set2)),                # False
        str(intersected.is_subset(set1)),      # True
        str(filtered),                         # cherry, brick
        str(mapped),                           # APPLE, BANANA, CHERRY, BRICK
        mapped.string_with_values(),           # APPLE (color: RED), ...
        str(colours),                          # {'red': 'brick', 'yellow': 'banana', 'dark red': 'cherry'}
        str(lengths),                          # [5, 6, 6, 5]
        str(total),                            # 20
        f"elem: {rnd_elem}, value: {rnd_value}",
    ]

    intersected.clear()
    results.append(str(intersected.size()))    # 0
    return results


def main() -> None:
    """Entry-point for the demo."""

    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    for line in example():
        logger.info(line)


if __name__ == "__main__":
    main()
