"""
Generate recruits and team rosters. Uses an optional rng (or seed) for reproducibility.

Procedural logic:
- Nominal stars come from a weighted table: open market for a recruiting class, tilted by prestige for a roster.
- Gem/bust resolution turns nominal stars into effective stars; only effective stars scale attributes.
- Each player gets a child rng seeded from the parent, drawn up front, so player i sees the same
  stream whichever table picked its stars and players never depend on each other.
"""
import logging
import random
import uuid
from datetime import date

from models import Player
from models.constants import (
    POSITIONS,
    CLASS_YEARS,
    STAR_RATINGS,
    RECRUITING_CLASS_STAR_WEIGHTS,
    PRESTIGE_TILT,
    PRESTIGE_RANGE,
    ROSTER_POSITION_TEMPLATE,
    BATTING_HAND_GIVEN_THROW,
    SKILL_ATTRIBUTES,
    FASTBALL,
    TRANSFER_CHANCE,
    RATING_MIN,
    RATING_MAX,
)
from .attributes import (
    is_pitcher,
    generate_mental_attributes,
    generate_batting_attributes,
    generate_fielding_attributes,
    generate_pitching_attributes,
)
from .biography import (
    random_position,
    generate_height,
    generate_weight,
    determine_handedness,
    random_name,
    random_origin,
    random_high_school,
    random_previous_school,
    random_class_year,
    birthdate_for_year,
    random_jersey_number,
)
from .distributions import seed_rng, child_rng, weighted_choice
from .errors import InvalidArgumentError
from .pitches import generate_pitches
from .positions import generate_position_ratings
from .talent import check_stars, resolve_effective_talent, perfect_game_rating

logger = logging.getLogger(__name__)

MAX_SECONDARY_PITCHES = 5


# --- Argument checks ---

def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidArgumentError(f"count must be an integer >= 1, got {count!r}")
    return count


def _check_prestige(prestige: float) -> float:
    lo, hi = PRESTIGE_RANGE
    if isinstance(prestige, bool) or not isinstance(prestige, (int, float)) or not lo <= prestige <= hi:
        raise InvalidArgumentError(f"team prestige must be between {lo} and {hi}, got {prestige!r}")
    return prestige


def _check_star_weights(weights: dict[int, float]) -> dict[int, float]:
    """Validate a star table and return it in ascending star order."""
    if not weights:
        raise InvalidArgumentError("star weights must not be empty")
    for stars, weight in weights.items():
        if stars not in STAR_RATINGS:
            raise InvalidArgumentError(f"star weights keys must be 1-5, got {stars!r}")
        if weight < 0:
            raise InvalidArgumentError(f"star weight for {stars} must be >= 0, got {weight}")
    if sum(weights.values()) <= 0:
        raise InvalidArgumentError("star weights must sum to a positive value")
    return {s: float(weights[s]) for s in sorted(weights)}


def _rng_or_new(rng: random.Random | None) -> random.Random:
    if rng is not None:
        return rng
    seed = seed_rng(None)
    logger.debug("No rng supplied; seeding with %s", seed)
    return random.Random(seed)


# --- Star tables ---

def prestige_star_weights(
    prestige: float,
    base_weights: dict[int, float] | None = None,
) -> dict[int, float]:
    """
    Tilt the open-market table toward high stars for prestige above 50 (down below 50).
    Each weight is multiplied by PRESTIGE_TILT ** (t * (stars - 3)), t = (prestige - 50) / 50.
    """
    _check_prestige(prestige)
    base = _check_star_weights(base_weights or RECRUITING_CLASS_STAR_WEIGHTS)
    tilt = (prestige - 50) / 50
    return {s: w * PRESTIGE_TILT ** (tilt * (s - 3)) for s, w in base.items()}


# --- Invariants ---

def player_invariant_violations(player: Player) -> list[str]:
    """Every broken invariant on a generated player, as messages. Empty means valid."""
    problems = []
    for attr in SKILL_ATTRIBUTES:
        val = getattr(player, attr)
        if not RATING_MIN <= val <= RATING_MAX:
            problems.append(f"{attr}={val} outside {RATING_MIN}-{RATING_MAX}")
    if player.recruiting_stars not in STAR_RATINGS:
        problems.append(f"recruiting_stars={player.recruiting_stars}")
    if not 0.0 <= player.perfect_game_rating <= 10.0:
        problems.append(f"perfect_game_rating={player.perfect_game_rating}")
    if player.batting_hand not in BATTING_HAND_GIVEN_THROW.get(player.throwing_hand, {}):
        problems.append(f"hands {player.batting_hand}/{player.throwing_hand}")

    positions = [pr.position for pr in player.position_ratings]
    if sorted(positions) != sorted(POSITIONS):
        problems.append(f"position ratings cover {positions}")
    for pr in player.position_ratings:
        if not RATING_MIN <= pr.rating <= RATING_MAX:
            problems.append(f"position rating {pr.position}={pr.rating}")

    types = [p.type for p in player.pitches]
    if types.count(FASTBALL) != 1:
        problems.append(f"{types.count(FASTBALL)} fastballs")
    if len(set(types)) != len(types):
        problems.append(f"duplicate pitch types {types}")
    if not 1 <= len(types) - 1 <= MAX_SECONDARY_PITCHES:
        problems.append(f"{len(types) - 1} secondary pitches")
    for p in player.pitches:
        for field_name in ("velocity", "control", "movement", "stuff"):
            val = getattr(p, field_name)
            if not RATING_MIN <= val <= RATING_MAX:
                problems.append(f"{p.type} {field_name}={val}")
    return problems


# --- One player ---

def generate_player(
    rng: random.Random,
    nominal_stars: int,
    position: str | None = None,
    year: str | None = "Freshman",
    team_id: int | None = None,
    jersey_number: int | None = None,
    reference_date: date | None = None,
    gem_bust_table: dict[int, tuple[float, float]] | None = None,
) -> Player:
    """
    Build one complete player. year=None draws a class year (roster players);
    position=None draws a preferred position from the recruiting mix.
    """
    check_stars(nominal_stars)
    if position is not None and position not in POSITIONS:
        raise InvalidArgumentError(f"Unknown position: {position}")
    if year is not None and year not in CLASS_YEARS:
        raise InvalidArgumentError(f"Unknown class year: {year}")

    talent = resolve_effective_talent(nominal_stars, rng, gem_bust_table)
    stars = talent.effective_stars

    position = position or random_position(rng)
    pitcher = is_pitcher(position)
    height = generate_height(position, rng)
    weight = generate_weight(height, rng)
    batting_hand, throwing_hand = determine_handedness(rng)

    first_name, last_name = random_name(rng)
    nationality, hometown, state = random_origin(rng)
    year = year or random_class_year(rng)
    previous_school = None
    if year != "Freshman" and rng.random() < TRANSFER_CHANCE:
        previous_school = random_previous_school(rng)
    birthdate = birthdate_for_year(year, reference_date or date.today(), rng)
    if jersey_number is None:
        jersey_number = random_jersey_number(rng)

    player = Player(
        id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
        first_name=first_name,
        last_name=last_name,
        birthdate=birthdate,
        year=year,
        preferred_position=position,
        height=height,
        weight=weight,
        batting_hand=batting_hand,
        throwing_hand=throwing_hand,
        nationality=nationality,
        hometown=hometown,
        state=state,
        high_school=random_high_school(hometown, rng),
        previous_school=previous_school,
        jersey_number=jersey_number,
        team_id=team_id,
        recruiting_stars=nominal_stars,
        perfect_game_rating=perfect_game_rating(nominal_stars, rng),
        pitches=generate_pitches(stars, height, pitcher, rng),
        position_ratings=generate_position_ratings(position, height, stars, rng),
        **generate_mental_attributes(stars, rng),
        **generate_batting_attributes(stars, height, weight, batting_hand, rng),
        **generate_fielding_attributes(stars, height, weight, position, rng),
        **generate_pitching_attributes(stars, position, rng),
    )
    violations = player_invariant_violations(player)
    assert not violations, f"generated player {player.id} broke invariants: {violations}"
    logger.debug(
        "Generated %s %s (%s): %d stars nominal, %d effective (%s)",
        first_name, last_name, position, nominal_stars, stars, talent.status,
    )
    return player


# --- Classes and rosters ---

def generate_recruiting_class(
    count: int,
    rng: random.Random | None = None,
    star_weights: dict[int, float] | None = None,
    reference_date: date | None = None,
    gem_bust_table: dict[int, tuple[float, float]] | None = None,
) -> list[Player]:
    """
    Open-market recruiting class of incoming freshmen.
    star_weights overrides the default open-market table (stars -> weight).
    """
    _check_count(count)
    weights = _check_star_weights(star_weights or RECRUITING_CLASS_STAR_WEIGHTS)
    rng = _rng_or_new(rng)
    player_rngs = [child_rng(rng) for _ in range(count)]

    players = []
    for prng in player_rngs:
        stars = weighted_choice(weights, prng)
        players.append(
            generate_player(
                prng,
                stars,
                year="Freshman",
                reference_date=reference_date,
                gem_bust_table=gem_bust_table,
            )
        )
    logger.info("Generated recruiting class of %d (avg %.2f stars)", count, _avg_stars(players))
    return players


def _roster_positions(count: int, rng: random.Random) -> list[str]:
    """Template slots in random order, then weighted draws once the template runs out."""
    slots: list[str] = []
    for pos, n in ROSTER_POSITION_TEMPLATE:
        slots.extend([pos] * n)
    rng.shuffle(slots)
    slots = slots[:count]
    while len(slots) < count:
        slots.append(random_position(rng))
    return slots


def _roster_jersey_numbers(count: int, rng: random.Random) -> list[int | None]:
    """Unique jersey numbers while 0-99 can cover the roster; otherwise each player draws their own."""
    if count <= 100:
        return rng.sample(range(100), count)
    return [None] * count


def generate_team_roster(
    team_id: int,
    team_prestige: float,
    count: int,
    rng: random.Random | None = None,
    star_weights: dict[int, float] | None = None,
    reference_date: date | None = None,
    gem_bust_table: dict[int, tuple[float, float]] | None = None,
) -> list[Player]:
    """
    Fill a team roster. Star mix skews up with prestige (0-100); positions follow the roster template;
    class years are mixed.
    """
    _check_count(count)
    weights = prestige_star_weights(team_prestige, star_weights)
    rng = _rng_or_new(rng)
    player_rngs = [child_rng(rng) for _ in range(count)]
    positions = _roster_positions(count, rng)
    jerseys = _roster_jersey_numbers(count, rng)

    players = []
    for prng, position, jersey in zip(player_rngs, positions, jerseys):
        stars = weighted_choice(weights, prng)
        players.append(
            generate_player(
                prng,
                stars,
                position=position,
                year=None,
                team_id=team_id,
                jersey_number=jersey,
                reference_date=reference_date,
                gem_bust_table=gem_bust_table,
            )
        )
    logger.info(
        "Generated roster of %d for team %s (prestige %s, avg %.2f stars)",
        count, team_id, team_prestige, _avg_stars(players),
    )
    return players


def _avg_stars(players: list[Player]) -> float:
    return sum(p.recruiting_stars for p in players) / len(players)
