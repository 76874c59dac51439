# album_picker/core/randomizer.py
import logging
import random
from typing import Optional


def draw_excluding(rng: random.Random, minimum: int, maximum: int, excluded: Optional[int] = None) -> int:
    """
    Draws an integer uniformly from [minimum, maximum), never returning `excluded`.

    An exclusion outside the range is ignored. When the excluded value sits strictly
    inside the range, one side of it is picked (weighted by how many values each side
    holds, a fair coin when the sides are equal) and the draw is made on that side
    only, so the remaining values are never materialized.
    """
    if maximum <= minimum:
        raise ValueError(f"Empty range: [{minimum}, {maximum})")
    if excluded is None or excluded < minimum or excluded >= maximum:
        return rng.randrange(minimum, maximum)
    if maximum - minimum == 1:
        raise ValueError(f"Cannot exclude {excluded}: it is the only value in [{minimum}, {maximum})")
    if excluded == minimum:
        return rng.randrange(minimum + 1, maximum)
    if excluded == maximum - 1:
        return rng.randrange(minimum, maximum - 1)
    below = excluded - minimum
    if rng.randrange(0, maximum - minimum - 1) < below:
        return rng.randrange(minimum, excluded)
    return rng.randrange(excluded + 1, maximum)


def draw_index(rng: random.Random, count: int, last: Optional[int] = None) -> int:
    """Picks an index into a sequence of `count` items, avoiding `last` when there is a choice."""
    if count == 1:
        chosen = 0
    else:
        chosen = draw_excluding(rng, 0, count, last)
    logging.debug(f"RANDOM: Choosing between 0..{count} (excluding {last}) -> {chosen}")
    return chosen
