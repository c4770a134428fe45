"""
Skill attribute generation: mental, batting, fielding/baserunning and general pitching.

Procedural logic:
- Each category draws from a [base_min, base_max] band that widens upward with effective stars.
- Secondary effects are additive offsets on top of the band draw (body size, platoon side, position).
- Every value is clamped to 1-99 once, after its last adjustment.
"""
import random

from models.constants import (
    ATTRIBUTE_BASE_RANGES,
    NON_PITCHER_PITCHING_RANGE,
    LARGE_BUILD_MIN,
    SMALL_BUILD_MAX,
    HAND_LEFT,
    HAND_RIGHT,
    HAND_SWITCH,
    INFIELD_POSITIONS,
    OUTFIELD_POSITIONS,
    PITCHER_POSITIONS,
)
from models.ratings import clamp_rating
from .errors import InvalidArgumentError

SIZE_LARGE = "large"
SIZE_SMALL = "small"

STARTER_STAMINA_CHANCE = 0.7


def attribute_base_range(stars: int, category: str, is_pitcher: bool = True) -> tuple[int, int]:
    """(base_min, base_max) for a category at the given effective stars. Non-decreasing in stars."""
    if category == "pitching" and not is_pitcher:
        return NON_PITCHER_PITCHING_RANGE
    try:
        min_start, min_step, max_start, max_step = ATTRIBUTE_BASE_RANGES[category]
    except KeyError:
        raise InvalidArgumentError(f"Unknown attribute category: {category}") from None
    return min_start + (stars - 1) * min_step, max_start + (stars - 1) * max_step


def is_pitcher(position: str) -> bool:
    return position in PITCHER_POSITIONS


def size_class(height: int, weight: int) -> str | None:
    """large (>= 6'2" and 200 lb), small (<= 5'10" and 180 lb), or None."""
    if height >= LARGE_BUILD_MIN[0] and weight >= LARGE_BUILD_MIN[1]:
        return SIZE_LARGE
    if height <= SMALL_BUILD_MAX[0] and weight <= SMALL_BUILD_MAX[1]:
        return SIZE_SMALL
    return None


# --- Mental ---

def generate_mental_attributes(stars: int, rng: random.Random) -> dict[str, int]:
    """
    Personality traits with cross terms:
    greed falls with integrity; coachability rises with work ethic and falls with ego;
    loyalty rises with integrity and falls with greed.
    """
    lo, hi = attribute_base_range(stars, "mental")

    work_ethic = rng.randint(lo, hi + 10)
    intelligence = rng.randint(lo, hi + 5)
    integrity = rng.randint(lo, hi)

    ego = clamp_rating(rng.randint(30, 70) + stars * 5)
    greed = clamp_rating(rng.randint(20, 80) - integrity // 5)
    coachability = clamp_rating(rng.randint(30, 80) + work_ethic // 10 - ego // 10)
    loyalty = clamp_rating(rng.randint(30, 70) + integrity // 10 - greed // 10)

    return {
        "ego": ego,
        "confidence": clamp_rating(lo + rng.randint(-10, 40) + stars * 3),
        "composure": clamp_rating(rng.randint(lo, hi) + intelligence // 10),
        "greed": greed,
        "coachability": coachability,
        "work_ethic": clamp_rating(work_ethic),
        "loyalty": loyalty,
        "intelligence": clamp_rating(intelligence),
        "aggressiveness": clamp_rating(rng.randint(20, 80)),
        "integrity": clamp_rating(integrity),
        "leadership": clamp_rating(rng.randint(lo, hi) + work_ethic // 10),
        "adaptability": clamp_rating(rng.randint(lo, hi) + intelligence // 10),
        "recovery": clamp_rating(rng.randint(lo, hi) + work_ethic // 10),
    }


# --- Batting ---

def platoon_advantage(batting_hand: str) -> tuple[bool, bool]:
    """(advantaged vs right-handed pitching, advantaged vs left-handed pitching)."""
    vs_right = batting_hand in (HAND_LEFT, HAND_SWITCH)
    vs_left = batting_hand in (HAND_RIGHT, HAND_SWITCH)
    return vs_right, vs_left


def generate_batting_attributes(
    stars: int,
    height: int,
    weight: int,
    batting_hand: str,
    rng: random.Random,
) -> dict[str, int]:
    """Large builds trade contact for power, small builds the reverse; platoon side adds 5-15."""
    lo, hi = attribute_base_range(stars, "batting")
    size = size_class(height, weight)
    adv_vs_right, adv_vs_left = platoon_advantage(batting_hand)

    contact = rng.randint(lo, hi)
    power = rng.randint(lo, hi)
    if size == SIZE_LARGE:
        power += rng.randint(5, 15)
        contact -= rng.randint(0, 10)
    elif size == SIZE_SMALL:
        contact += rng.randint(5, 15)
        power -= rng.randint(0, 10)

    def _split(base: int, advantaged: bool) -> int:
        return clamp_rating(base + (rng.randint(5, 15) if advantaged else 0))

    contact_vs_right = _split(contact, adv_vs_right)
    contact_vs_left = _split(contact, adv_vs_left)
    power_vs_right = _split(power, adv_vs_right)
    power_vs_left = _split(power, adv_vs_left)

    eye = rng.randint(lo, hi)
    discipline = rng.randint(lo, hi)

    defensiveness = rng.randint(lo, hi)
    ground_ball_rate = rng.randint(40, 60)
    if size == SIZE_SMALL:
        defensiveness += rng.randint(5, 15)
        ground_ball_rate += rng.randint(5, 15)
    elif size == SIZE_LARGE:
        ground_ball_rate -= rng.randint(5, 15)

    bunting_skill = rng.randint(lo, hi)
    if size == SIZE_SMALL or defensiveness > 60:
        bunting_skill += rng.randint(5, 15)

    return {
        "contact_vs_left": contact_vs_left,
        "contact_vs_right": contact_vs_right,
        "power_vs_left": power_vs_left,
        "power_vs_right": power_vs_right,
        "eye": clamp_rating(eye),
        "discipline": clamp_rating(discipline),
        "defensiveness": clamp_rating(defensiveness),
        "ground_ball_rate": clamp_rating(ground_ball_rate),
        "bunting_skill": clamp_rating(bunting_skill),
    }


# --- Baserunning & fielding ---

def generate_fielding_attributes(
    stars: int,
    height: int,
    weight: int,
    position: str,
    rng: random.Random,
) -> dict[str, int]:
    """Speed runs opposite to size; range and stealing follow speed; arm and glove follow position."""
    lo, hi = attribute_base_range(stars, "fielding")
    size = size_class(height, weight)
    infielder = position in INFIELD_POSITIONS
    outfielder = position in OUTFIELD_POSITIONS

    speed = rng.randint(lo, hi)
    if size == SIZE_SMALL:
        speed += rng.randint(10, 20)
    elif size == SIZE_LARGE:
        speed -= rng.randint(5, 15)

    stealing_ability = speed + rng.randint(-10, 10)

    fielding_range = clamp_rating(speed + rng.randint(-15, 15))
    if outfielder:
        fielding_range += rng.randint(5, 15)
    elif infielder and position != "1B":
        fielding_range += rng.randint(0, 10)

    arm_strength = rng.randint(lo, hi)
    if outfielder or position in ("3B", "SS"):
        arm_strength += rng.randint(5, 15)

    arm_accuracy = rng.randint(lo, hi)
    if infielder:
        arm_accuracy += rng.randint(5, 15)

    handling = rng.randint(lo, hi)
    blocking = rng.randint(lo, hi)
    if position == "C":
        handling += rng.randint(10, 20)
        blocking += rng.randint(10, 20)

    return {
        "speed": clamp_rating(speed),
        "stealing_ability": clamp_rating(stealing_ability),
        "fielding_range": clamp_rating(fielding_range),
        "arm_strength": clamp_rating(arm_strength),
        "arm_accuracy": clamp_rating(arm_accuracy),
        "handling": clamp_rating(handling),
        "blocking": clamp_rating(blocking),
    }


# --- Pitching (general) ---

def generate_pitching_attributes(stars: int, position: str, rng: random.Random) -> dict[str, int]:
    """Stamina and holding runners; pitchers usually carry a starter's stamina bump."""
    pitcher = is_pitcher(position)
    lo, hi = attribute_base_range(stars, "pitching", is_pitcher=pitcher)
    stamina = rng.randint(lo, hi)
    hold_runners = rng.randint(lo, hi)
    if pitcher and rng.random() < STARTER_STAMINA_CHANCE:
        stamina += rng.randint(10, 20)
    return {
        "stamina": clamp_rating(stamina),
        "hold_runners": clamp_rating(hold_runners),
    }
