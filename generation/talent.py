"""
Gem/bust talent resolution.
A recruit's nominal stars are what scouts see; effective stars drive every attribute draw.
"""
import random
from dataclasses import dataclass

from models.constants import (
    STAR_RATINGS,
    GEM_BUST_CHANCES,
    TALENT_OFFSET_WEIGHTS,
    PERFECT_GAME_RANGES,
)
from .distributions import weighted_choice, clamp
from .errors import InvalidArgumentError

STATUS_GEM = "gem"
STATUS_BUST = "bust"
STATUS_NORMAL = "normal"


@dataclass(frozen=True)
class TalentResolution:
    nominal_stars: int
    effective_stars: int
    status: str  # gem / bust / normal


def check_stars(stars: int) -> int:
    if isinstance(stars, bool) or not isinstance(stars, int) or stars not in STAR_RATINGS:
        raise InvalidArgumentError(f"stars must be an integer 1-5, got {stars!r}")
    return stars


def recruit_status(
    stars: int,
    rng: random.Random,
    table: dict[int, tuple[float, float]] | None = None,
) -> str:
    """Draw gem / bust / normal from the star-specific chances (one uniform draw)."""
    gem_chance, bust_chance = (table or GEM_BUST_CHANCES)[check_stars(stars)]
    return weighted_choice(
        {
            STATUS_GEM: gem_chance,
            STATUS_BUST: bust_chance,
            STATUS_NORMAL: max(0.0, 1.0 - gem_chance - bust_chance),
        },
        rng,
    )


def talent_offset(status: str, rng: random.Random) -> int:
    """Signed star offset: +/-1 (75%), +/-2 (20%), +/-3 (5%); 0 for normal."""
    if status == STATUS_NORMAL:
        return 0
    magnitude = weighted_choice(TALENT_OFFSET_WEIGHTS, rng)
    return magnitude if status == STATUS_GEM else -magnitude


def resolve_effective_talent(
    nominal_stars: int,
    rng: random.Random,
    table: dict[int, tuple[float, float]] | None = None,
) -> TalentResolution:
    status = recruit_status(nominal_stars, rng, table)
    effective = int(clamp(nominal_stars + talent_offset(status, rng), 1, 5))
    return TalentResolution(nominal_stars=nominal_stars, effective_stars=effective, status=status)


def perfect_game_rating(nominal_stars: int, rng: random.Random) -> float:
    """Pre-college Perfect Game grade; tied to nominal stars, not true talent."""
    lo, hi = PERFECT_GAME_RANGES[check_stars(nominal_stars)]
    return round(rng.uniform(lo, hi), 1)
