"""
Pitch repertoire: a four-seam fastball plus talent-scaled secondary pitches.
Secondary velocities are a type-specific share of fastball mph.
"""
import math
import random

from models import Pitch
from models.constants import (
    FASTBALL,
    SECONDARY_PITCH_WEIGHTS,
    PITCH_VELOCITY_PERCENT,
    DEFAULT_VELOCITY_PERCENT,
    FASTBALL_MPH_RANGE,
    FASTBALL_MPH_BOUNDS,
)
from models.ratings import clamp_rating
from .attributes import attribute_base_range
from .distributions import clamp, sample_without_replacement


def fastball_mph(stars: int, height: int, pitcher: bool, rng: random.Random) -> int:
    """True fastball speed: 85-95 base, talent bonus for pitchers, 1-3 mph for tall arms."""
    mph = rng.randint(*FASTBALL_MPH_RANGE)
    if pitcher:
        mph += math.floor(stars * 1.5)
    if height >= 74:
        mph += rng.randint(1, 3)
    return int(clamp(mph, *FASTBALL_MPH_BOUNDS))


def velocity_rating(mph: float) -> int:
    """mph onto the rating band; 99 and up all read as 99."""
    return clamp_rating(math.floor(mph))


def secondary_pitch_count(stars: int, pitcher: bool) -> int:
    if pitcher:
        return min(2 + stars // 2, 5)
    return min(1 + stars // 3, 2)


def generate_pitches(stars: int, height: int, pitcher: bool, rng: random.Random) -> tuple[Pitch, ...]:
    lo, hi = attribute_base_range(stars, "pitching", is_pitcher=pitcher)
    mph = fastball_mph(stars, height, pitcher, rng)

    pitches = [
        Pitch(
            type=FASTBALL,
            velocity=velocity_rating(mph),
            control=clamp_rating(rng.randint(lo, hi)),
            movement=clamp_rating(rng.randint(lo - 10, hi - 10)),
            stuff=clamp_rating(rng.randint(lo, hi)),
            mph=mph,
        )
    ]

    count = secondary_pitch_count(stars, pitcher)
    for pitch_type in sample_without_replacement(SECONDARY_PITCH_WEIGHTS, count, rng):
        control = clamp_rating(rng.randint(lo - 10, hi))
        movement = clamp_rating(rng.randint(lo, hi + 10))
        stuff = clamp_rating(rng.randint(lo - 5, hi + 5))
        pct = rng.randint(*PITCH_VELOCITY_PERCENT.get(pitch_type, DEFAULT_VELOCITY_PERCENT))
        pitch_mph = math.floor(mph * pct / 100)
        pitches.append(
            Pitch(
                type=pitch_type,
                velocity=velocity_rating(pitch_mph),
                control=control,
                movement=movement,
                stuff=stuff,
                mph=pitch_mph,
            )
        )
    return tuple(pitches)
