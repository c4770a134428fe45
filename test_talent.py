"""
Gem/bust talent resolution, Perfect Game grades and the weighted sampler underneath them.
"""
import random
from collections import Counter

import pytest

from generation.distributions import (
    weighted_choice,
    sample_without_replacement,
    seed_rng,
    random_date,
)
from generation.errors import InvalidArgumentError
from generation.talent import (
    STATUS_GEM,
    STATUS_BUST,
    STATUS_NORMAL,
    resolve_effective_talent,
    recruit_status,
    talent_offset,
    perfect_game_rating,
)
from models.constants import PERFECT_GAME_RANGES

NO_GEM_BUST = {s: (0.0, 0.0) for s in range(1, 6)}
ALWAYS_GEM = {s: (1.0, 0.0) for s in range(1, 6)}
ALWAYS_BUST = {s: (0.0, 1.0) for s in range(1, 6)}


@pytest.mark.parametrize("stars", [1, 2, 3, 4, 5])
def test_effective_talent_stays_in_star_range(stars):
    rng = random.Random(stars)
    for _ in range(2000):
        res = resolve_effective_talent(stars, rng)
        assert 1 <= res.effective_stars <= 5
        assert res.nominal_stars == stars
        if res.status == STATUS_NORMAL:
            assert res.effective_stars == stars
        elif res.status == STATUS_GEM:
            assert res.effective_stars >= stars
        else:
            assert res.effective_stars <= stars


def test_forced_normal_applies_no_offset():
    rng = random.Random(1)
    for stars in range(1, 6):
        res = resolve_effective_talent(stars, rng, NO_GEM_BUST)
        assert res.status == STATUS_NORMAL
        assert res.effective_stars == stars


def test_forced_gem_and_bust_clamp_at_edges():
    rng = random.Random(2)
    assert resolve_effective_talent(5, rng, ALWAYS_GEM).effective_stars == 5
    assert resolve_effective_talent(1, rng, ALWAYS_BUST).effective_stars == 1
    for _ in range(200):
        assert resolve_effective_talent(3, rng, ALWAYS_GEM).effective_stars in (4, 5)
        assert resolve_effective_talent(3, rng, ALWAYS_BUST).effective_stars in (1, 2)


def test_low_star_recruits_bust_more_than_they_boom():
    rng = random.Random(99)
    n = 20000
    one_star = Counter(recruit_status(1, rng) for _ in range(n))
    assert one_star[STATUS_BUST] / n == pytest.approx(0.60, abs=0.02)
    assert one_star[STATUS_GEM] / n == pytest.approx(0.20, abs=0.02)

    three_star = Counter(recruit_status(3, rng) for _ in range(n))
    assert three_star[STATUS_BUST] / n == pytest.approx(0.10, abs=0.015)
    assert three_star[STATUS_GEM] / n == pytest.approx(0.10, abs=0.015)


def test_offset_magnitudes_follow_75_20_5():
    rng = random.Random(5)
    n = 20000
    gems = Counter(talent_offset(STATUS_GEM, rng) for _ in range(n))
    assert set(gems) <= {1, 2, 3}
    assert gems[1] / n == pytest.approx(0.75, abs=0.02)
    assert gems[2] / n == pytest.approx(0.20, abs=0.02)
    assert gems[3] / n == pytest.approx(0.05, abs=0.01)
    busts = {talent_offset(STATUS_BUST, rng) for _ in range(500)}
    assert busts <= {-1, -2, -3}
    assert talent_offset(STATUS_NORMAL, rng) == 0


@pytest.mark.parametrize("stars", [1, 2, 3, 4, 5])
def test_perfect_game_rating_uses_nominal_range(stars):
    lo, hi = PERFECT_GAME_RANGES[stars]
    rng = random.Random(stars * 11)
    for _ in range(500):
        assert lo <= perfect_game_rating(stars, rng) <= hi


@pytest.mark.parametrize("bad", [0, 6, -1, 2.5, True, "3", None])
def test_bad_star_values_rejected(bad):
    with pytest.raises(InvalidArgumentError):
        resolve_effective_talent(bad, random.Random(0))
    with pytest.raises(InvalidArgumentError):
        perfect_game_rating(bad, random.Random(0))


# --- Sampler ---

def test_weighted_choice_never_picks_zero_weight():
    rng = random.Random(3)
    picks = {weighted_choice({"a": 0.0, "b": 1.0, "c": 0.0}, rng) for _ in range(500)}
    assert picks == {"b"}


def test_weighted_choice_tracks_weights():
    rng = random.Random(4)
    n = 10000
    counts = Counter(weighted_choice({"x": 3, "y": 1}, rng) for _ in range(n))
    assert counts["x"] / n == pytest.approx(0.75, abs=0.02)


@pytest.mark.parametrize("options", [{}, {"a": -1.0, "b": 2.0}, {"a": 0.0}])
def test_weighted_choice_rejects_bad_tables(options):
    with pytest.raises(InvalidArgumentError):
        weighted_choice(options, random.Random(0))


def test_sample_without_replacement_is_distinct():
    rng = random.Random(8)
    options = {k: 1.0 for k in "abcdefg"}
    for k in range(1, 8):
        picked = sample_without_replacement(options, k, rng)
        assert len(picked) == k
        assert len(set(picked)) == k


def test_seed_rng_is_stable_for_strings():
    assert seed_rng("spring-2025") == seed_rng("spring-2025")
    assert seed_rng(42) == 42
    assert seed_rng("42") == 42
    assert seed_rng("-7") == -7
    # int() rejects these, so they hash like any other label
    for label in ("--5", "\u00b2"):
        assert seed_rng(label) == seed_rng(label)
        assert 0 <= seed_rng(label) < 2**31
    assert 0 <= seed_rng(None) < 2**31


def test_random_date_inclusive_bounds():
    from datetime import date
    rng = random.Random(6)
    start, end = date(2005, 1, 1), date(2005, 1, 3)
    seen = {random_date(start, end, rng) for _ in range(200)}
    assert seen == {date(2005, 1, 1), date(2005, 1, 2), date(2005, 1, 3)}
