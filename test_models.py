"""
Player record export/import and display helpers.
"""
import json
import random
from datetime import date

import pytest

from generation import generate_recruiting_class, generate_team_roster
from models import Player, Pitch, PositionRating, players_to_json, players_from_json
from models.ratings import (
    clamp_rating,
    get_position_rating,
    best_positions,
    player_age,
    formatted_height,
    pitch_full_name,
)

REF_DATE = date(2025, 8, 15)


@pytest.fixture(scope="module")
def players():
    recruits = generate_recruiting_class(15, rng=random.Random(8), reference_date=REF_DATE)
    roster = generate_team_roster(4, 80, 15, rng=random.Random(9), reference_date=REF_DATE)
    return recruits + roster


def test_dict_round_trip(players):
    for p in players:
        assert Player.from_dict(p.to_dict()) == p


def test_json_round_trip(players):
    text = players_to_json(players, indent=2)
    assert players_from_json(text) == players
    # export is plain JSON: dates as ISO strings, pitches as objects
    raw = json.loads(text)
    assert raw[0]["birthdate"] == players[0].birthdate.isoformat()
    assert raw[0]["pitches"][0]["type"] == "FF"


def test_optional_fields_only_exported_when_set():
    p = Player(id="x", birthdate=date(2006, 5, 1))
    d = p.to_dict()
    assert "team_id" not in d
    assert "previous_school" not in d
    assert "agency" not in d
    q = Player(id="y", birthdate=date(2006, 5, 1), team_id=3, agency="Boras Jr.")
    assert Player.from_dict(q.to_dict()) == q


def test_players_from_json_rejects_non_list():
    with pytest.raises(ValueError):
        players_from_json('{"id": "abc"}')


def test_from_dict_requires_id_and_birthdate():
    with pytest.raises(KeyError):
        Player.from_dict({"birthdate": "2006-01-01"})
    with pytest.raises(ValueError):
        Player.from_dict({"id": "a", "birthdate": "not-a-date"})


def test_players_are_frozen(players):
    with pytest.raises(AttributeError):
        players[0].speed = 99


def test_broad_position_survives_import():
    p = Player(id="u1", birthdate=date(2005, 1, 1), preferred_position="UTIL")
    assert Player.from_dict(p.to_dict()).preferred_position == "UTIL"


def test_pitch_import_defaults_mph_to_velocity():
    pitch = Pitch.from_dict({"type": "SL", "velocity": 80, "control": 50, "movement": 60, "stuff": 55})
    assert pitch.mph == 80


# --- Display helpers ---

def test_formatted_height():
    assert formatted_height(74) == "6'2\""
    assert formatted_height(66) == "5'6\""


def test_player_age_birthday_boundary():
    assert player_age(date(2006, 8, 15), date(2024, 8, 15)) == 18
    assert player_age(date(2006, 8, 16), date(2024, 8, 15)) == 17


def test_position_lookups():
    p = Player(
        id="p",
        birthdate=date(2006, 1, 1),
        position_ratings=(
            PositionRating("C", 40),
            PositionRating("1B", 75),
            PositionRating("SS", 75),
            PositionRating("LF", 60),
        ),
    )
    assert get_position_rating(p, "1B") == 75
    assert get_position_rating(p, "CF") is None
    assert best_positions(p, 2) == [("1B", 75), ("SS", 75)]


def test_pitch_full_name_and_clamp():
    assert pitch_full_name("KC") == "Knuckle-curve"
    assert pitch_full_name("XX") == "XX"
    assert clamp_rating(-4) == 1
    assert clamp_rating(150) == 99
    assert clamp_rating(55) == 55
