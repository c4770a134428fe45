"""
End-to-end generation: recruiting classes and team rosters.

Generates seeded classes and rosters and checks every player against the record
invariants (bounds, position coverage, pitch set, handedness), plus the 5-star and
prestige scenarios and seeded reproducibility.
"""
import random
from collections import Counter
from datetime import date

import pytest

from generation import (
    generate_player,
    generate_recruiting_class,
    generate_team_roster,
    prestige_star_weights,
    player_invariant_violations,
    InvalidArgumentError,
)
from generation.attributes import attribute_base_range
from generation.biography import determine_handedness, birthdate_for_year
from models.constants import (
    POSITIONS,
    SKILL_ATTRIBUTES,
    FASTBALL,
    RECRUITING_CLASS_STAR_WEIGHTS,
    BATTING_HAND_GIVEN_THROW,
    CLASS_YEAR_AGES,
)
from models.ratings import player_age

REF_DATE = date(2025, 8, 15)
NO_GEM_BUST = {s: (0.0, 0.0) for s in range(1, 6)}


@pytest.fixture(scope="module")
def recruiting_class():
    return generate_recruiting_class(200, rng=random.Random(42), reference_date=REF_DATE)


@pytest.fixture(scope="module")
def roster():
    return generate_team_roster(7, 60, 40, rng=random.Random(43), reference_date=REF_DATE)


def test_every_player_passes_invariants(recruiting_class, roster):
    for p in recruiting_class + roster:
        assert player_invariant_violations(p) == []


def test_skills_in_rating_band(recruiting_class):
    for p in recruiting_class:
        for attr in SKILL_ATTRIBUTES:
            assert 1 <= getattr(p, attr) <= 99, (p.id, attr)


def test_one_rating_per_position(recruiting_class):
    for p in recruiting_class:
        positions = [r.position for r in p.position_ratings]
        assert positions == POSITIONS
        assert len(set(positions)) == 12


def test_pitch_sets(recruiting_class):
    for p in recruiting_class:
        types = [pitch.type for pitch in p.pitches]
        assert types.count(FASTBALL) == 1
        assert len(set(types)) == len(types)
        assert 1 <= len(types) - 1 <= 5
        assert all(1 <= pitch.velocity <= 99 for pitch in p.pitches)


def test_recruits_are_incoming_freshmen(recruiting_class):
    for p in recruiting_class:
        assert p.year == "Freshman"
        assert p.team_id is None
        assert p.previous_school is None
        assert player_age(p.birthdate, REF_DATE) == 18
        assert p.preferred_position in POSITIONS
        assert 66 <= p.height <= 79
        assert 150 <= p.weight <= 250
        assert 0 <= p.jersey_number <= 99


def test_ids_are_unique(recruiting_class, roster):
    ids = [p.id for p in recruiting_class + roster]
    assert len(set(ids)) == len(ids)


def test_roster_shape(roster):
    assert len(roster) == 40
    assert all(p.team_id == 7 for p in roster)
    jerseys = [p.jersey_number for p in roster]
    assert len(set(jerseys)) == len(jerseys)
    counts = Counter(p.preferred_position for p in roster)
    # 32-slot template is always used in full before any weighted extras
    assert counts["SP"] >= 5
    assert counts["RP"] >= 7
    assert counts["C"] >= 3
    for p in roster:
        assert player_age(p.birthdate, REF_DATE) == CLASS_YEAR_AGES[p.year]


def test_small_roster_draws_from_template():
    players = generate_team_roster(3, 50, 5, rng=random.Random(1), reference_date=REF_DATE)
    assert len(players) == 5
    assert all(p.preferred_position in POSITIONS for p in players)


def test_five_star_scenario():
    lo, hi = attribute_base_range(5, "batting")
    assert (lo, hi) == (62, 90)
    assert attribute_base_range(5, "fielding") == (62, 90)
    for seed in range(25):
        [p] = generate_recruiting_class(
            1,
            rng=random.Random(seed),
            star_weights={5: 1.0},
            gem_bust_table=NO_GEM_BUST,
            reference_date=REF_DATE,
        )
        assert p.recruiting_stars == 5
        assert 9.5 <= p.perfect_game_rating <= 10.0
        # straight band draws, no size or position offsets
        assert lo <= p.eye <= hi
        assert lo <= p.discipline <= hi
        assert player_invariant_violations(p) == []


def test_prestige_skews_stars_upward():
    open_class = generate_recruiting_class(25, rng=random.Random(2024), reference_date=REF_DATE)
    elite = generate_team_roster(1, 95, 25, rng=random.Random(2024), reference_date=REF_DATE)
    open_avg = sum(p.recruiting_stars for p in open_class) / 25
    elite_avg = sum(p.recruiting_stars for p in elite) / 25
    assert elite_avg > open_avg
    # same child streams, dominated table: no player drops a star
    for a, b in zip(open_class, elite):
        assert b.recruiting_stars >= a.recruiting_stars


def test_prestige_tables_stochastically_ordered():
    def cdf(weights):
        total = sum(weights.values())
        acc, out = 0.0, []
        for s in range(1, 6):
            acc += weights[s]
            out.append(acc / total)
        return out

    open_cdf = cdf(RECRUITING_CLASS_STAR_WEIGHTS)
    high_cdf = cdf(prestige_star_weights(95))
    low_cdf = cdf(prestige_star_weights(5))
    mid_cdf = cdf(prestige_star_weights(50))
    assert mid_cdf == pytest.approx(open_cdf)
    for h, o, l in zip(high_cdf, open_cdf, low_cdf):
        assert h <= o + 1e-12
        assert l >= o - 1e-12


def test_seeded_runs_are_reproducible():
    a = generate_recruiting_class(10, rng=random.Random(77), reference_date=REF_DATE)
    b = generate_recruiting_class(10, rng=random.Random(77), reference_date=REF_DATE)
    c = generate_recruiting_class(10, rng=random.Random(78), reference_date=REF_DATE)
    assert a == b
    assert a != c


def test_handedness_joint_table():
    rng = random.Random(11)
    n = 20000
    draws = [determine_handedness(rng) for _ in range(n)]
    throws = Counter(t for _, t in draws)
    assert throws["Left"] / n == pytest.approx(0.2, abs=0.015)
    for bat, throw in draws:
        assert bat in BATTING_HAND_GIVEN_THROW[throw]
    lefty_bats = Counter(b for b, t in draws if t == "Left")
    lefties = sum(lefty_bats.values())
    assert lefty_bats["Left"] / lefties == pytest.approx(0.70, abs=0.03)
    assert lefty_bats["Switch"] / lefties == pytest.approx(0.20, abs=0.03)
    righty_bats = Counter(b for b, t in draws if t == "Right")
    righties = sum(righty_bats.values())
    assert righty_bats["Right"] / righties == pytest.approx(0.80, abs=0.02)
    assert righty_bats["Switch"] / righties == pytest.approx(0.05, abs=0.01)


def test_birthdate_matches_class_year_on_leap_day():
    rng = random.Random(3)
    leap = date(2024, 2, 29)
    for year, age in CLASS_YEAR_AGES.items():
        for _ in range(50):
            assert player_age(birthdate_for_year(year, leap, rng), leap) == age


def test_generate_player_with_fixed_position():
    p = generate_player(random.Random(5), 4, position="C", team_id=9, reference_date=REF_DATE)
    assert p.preferred_position == "C"
    assert p.team_id == 9
    assert p.recruiting_stars == 4
    catcher = next(r for r in p.position_ratings if r.position == "C")
    assert catcher.rating >= 40


# --- Bad arguments ---

@pytest.mark.parametrize("count", [0, -3, 1.5, True, None, "5"])
def test_bad_counts(count):
    with pytest.raises(InvalidArgumentError):
        generate_recruiting_class(count, rng=random.Random(0))
    with pytest.raises(InvalidArgumentError):
        generate_team_roster(1, 50, count, rng=random.Random(0))


@pytest.mark.parametrize("prestige", [-0.1, 100.5, 250, None, "high"])
def test_bad_prestige(prestige):
    with pytest.raises(InvalidArgumentError):
        generate_team_roster(1, prestige, 10, rng=random.Random(0))


@pytest.mark.parametrize("weights", [{6: 1.0}, {0: 1.0}, {3: -1.0, 4: 2.0}, {1: 0.0, 2: 0.0}])
def test_bad_star_weights(weights):
    with pytest.raises(InvalidArgumentError):
        generate_recruiting_class(3, rng=random.Random(0), star_weights=weights)


def test_bad_position_or_stars():
    with pytest.raises(InvalidArgumentError):
        generate_player(random.Random(0), 3, position="QB")
    with pytest.raises(InvalidArgumentError):
        generate_player(random.Random(0), 0)


@pytest.mark.parametrize("year", ["Senoir", ""])
def test_unknown_class_year_rejected(year):
    with pytest.raises(InvalidArgumentError):
        generate_player(random.Random(0), 3, year=year)
