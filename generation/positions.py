"""
Position fit: a 1-99 rating at every position.
Preferred position scales with talent, related positions get 80% of that, the rest are a low baseline.
Height nudges 1B/DH up for tall players and 2B/SS up for short ones.
"""
import math
import random

from models import PositionRating
from models.constants import (
    POSITIONS,
    RELATED_POSITIONS,
    PREFERRED_RATING_BASE,
    PREFERRED_RATING_STEP,
    RELATED_POSITION_FACTOR,
)
from models.ratings import clamp_rating


def preferred_base_rating(stars: int) -> int:
    return PREFERRED_RATING_BASE + (stars - 1) * PREFERRED_RATING_STEP


def related_positions(position: str) -> tuple[str, ...]:
    return RELATED_POSITIONS.get(position, ())


def _build_adjustment(position: str, height: int) -> int:
    if position in ("1B", "DH") and height >= 74:
        return (height - 73) * 2
    if position in ("SS", "2B") and height <= 72:
        return (73 - height) * 2
    return 0


def generate_position_ratings(
    preferred_position: str,
    height: int,
    stars: int,
    rng: random.Random,
) -> tuple[PositionRating, ...]:
    base = preferred_base_rating(stars)
    related = related_positions(preferred_position)
    ratings = []
    for position in POSITIONS:
        if position == preferred_position:
            rating = base + rng.randint(0, 19)
        elif position in related:
            rating = math.floor(base * RELATED_POSITION_FACTOR) + rng.randint(0, 14)
        else:
            rating = 20 + rng.randint(0, 29)
        rating += _build_adjustment(position, height)
        ratings.append(PositionRating(position=position, rating=clamp_rating(rating)))
    return tuple(ratings)
