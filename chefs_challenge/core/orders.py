from __future__ import annotations

import random
from collections.abc import Sequence

from chefs_challenge.ingredients import FILLINGS, IngredientKind

Order = tuple[IngredientKind, ...]


def filling_bounds(level: int) -> tuple[int, int]:
    """Inclusive (min, max) number of fillings for a level."""

    return min(level + 2, 6), min(level * 2 + 3, 10)


def generate_order(level: int, *, rng: random.Random) -> Order:
    """Draw a random burger for `level`.

    The filling count is uniform over `filling_bounds(level)` and each filling is
    drawn independently (with replacement). Buns always close both ends.
    """

    min_fill, max_fill = filling_bounds(level)
    count = rng.randint(min_fill, max_fill)
    fillings = [rng.choice(FILLINGS) for _ in range(count)]
    return (IngredientKind.BUN_BOTTOM, *fillings, IngredientKind.BUN_TOP)


def order_matches(player_stack: Sequence[IngredientKind], order: Sequence[IngredientKind]) -> bool:
    # Layer order matters: a swapped patty and cheese is a different burger.
    if len(player_stack) != len(order):
        return False
    return all(a == b for a, b in zip(player_stack, order))
