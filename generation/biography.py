"""
Biography: position, body, handedness, origin and class year.

Procedural logic:
- Height is normal around a position mean (1B/SP tall, C/2B short), weight is linear in height plus noise.
- Batting hand is always drawn conditioned on the throwing hand, never on its own.
- Birthdate follows class year, measured from a reference date so seeded runs don't drift day to day.
"""
import random
from datetime import date

from models.constants import (
    POSITION_WEIGHTS,
    HEIGHT_MEANS,
    DEFAULT_HEIGHT_MEAN,
    HEIGHT_STD_DEV,
    HEIGHT_RANGE,
    WEIGHT_STD_DEV,
    WEIGHT_RANGE,
    LEFT_THROW_CHANCE,
    BATTING_HAND_GIVEN_THROW,
    HAND_LEFT,
    HAND_RIGHT,
    NATIONALITY_WEIGHTS,
    US_STATES,
    US_TOWNS,
    FOREIGN_HOMETOWNS,
    HIGH_SCHOOL_SUFFIXES,
    PREVIOUS_SCHOOLS,
    FIRST_NAMES,
    LAST_NAMES,
    CLASS_YEAR_AGES,
    CLASS_YEAR_WEIGHTS,
    JERSEY_NUMBER_RANGE,
)
from .distributions import weighted_choice, clamp, random_date


def random_position(rng: random.Random) -> str:
    return weighted_choice(POSITION_WEIGHTS, rng)


def generate_height(position: str, rng: random.Random) -> int:
    mean = HEIGHT_MEANS.get(position, DEFAULT_HEIGHT_MEAN)
    height = round(rng.gauss(mean, HEIGHT_STD_DEV))
    return int(clamp(height, *HEIGHT_RANGE))


def generate_weight(height: int, rng: random.Random) -> int:
    base = (height - 60) * 5 + 100
    weight = round(base + rng.gauss(0, WEIGHT_STD_DEV))
    return int(clamp(weight, *WEIGHT_RANGE))


def determine_handedness(rng: random.Random) -> tuple[str, str]:
    """Return (batting_hand, throwing_hand)."""
    throwing = HAND_LEFT if rng.random() < LEFT_THROW_CHANCE else HAND_RIGHT
    batting = weighted_choice(BATTING_HAND_GIVEN_THROW[throwing], rng)
    return batting, throwing


def random_name(rng: random.Random) -> tuple[str, str]:
    return rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)


def random_origin(rng: random.Random) -> tuple[str, str, str]:
    """Return (nationality, hometown, state). Non-Americans use province or country as state."""
    nationality = weighted_choice(NATIONALITY_WEIGHTS, rng)
    if nationality in FOREIGN_HOMETOWNS:
        hometown, state = rng.choice(FOREIGN_HOMETOWNS[nationality])
    else:
        hometown, state = rng.choice(US_TOWNS), rng.choice(US_STATES)
    return nationality, hometown, state


def random_high_school(hometown: str, rng: random.Random) -> str:
    return f"{hometown} {rng.choice(HIGH_SCHOOL_SUFFIXES)}"


def random_previous_school(rng: random.Random) -> str:
    return rng.choice(PREVIOUS_SCHOOLS)


def random_class_year(rng: random.Random) -> str:
    return weighted_choice(CLASS_YEAR_WEIGHTS, rng)


def birthdate_for_year(year: str, reference_date: date, rng: random.Random) -> date:
    """Birthdate such that the player is CLASS_YEAR_AGES[year] on reference_date."""
    age = CLASS_YEAR_AGES[year]
    latest = _years_before(reference_date, age)
    earliest = _years_before(reference_date, age + 1)
    return random_date(_next_day(earliest), latest, rng)


def random_jersey_number(rng: random.Random) -> int:
    return rng.randint(*JERSEY_NUMBER_RANGE)


def _years_before(d: date, years: int) -> date:
    try:
        return d.replace(year=d.year - years)
    except ValueError:  # Feb 29
        return d.replace(year=d.year - years, day=28)


def _next_day(d: date) -> date:
    return date.fromordinal(d.toordinal() + 1)
