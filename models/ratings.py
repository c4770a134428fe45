"""
Read-side helpers over generated players: position fit lookups, age and height display.
"""
from datetime import date

from .constants import PITCH_NAMES, RATING_MIN, RATING_MAX
from .player import Player


def clamp_rating(value: float) -> int:
    """Clamp to the 1-99 rating band."""
    return int(max(RATING_MIN, min(RATING_MAX, value)))


def get_position_rating(player: Player, position: str) -> int | None:
    """Player's fit rating at a position, or None if the position is unknown."""
    for pr in player.position_ratings:
        if pr.position == position:
            return pr.rating
    return None


def best_positions(player: Player, n: int = 3) -> list[tuple[str, int]]:
    """Top n (position, rating) pairs, best first; ties keep position order."""
    ranked = sorted(player.position_ratings, key=lambda pr: -pr.rating)
    return [(pr.position, pr.rating) for pr in ranked[:n]]


def player_age(birthdate: date, today: date | None = None) -> int:
    today = today or date.today()
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


def formatted_height(height_inches: int) -> str:
    """Feet and inches, e.g. 74 -> 6'2"."""
    return f"{height_inches // 12}'{height_inches % 12}\""


def pitch_full_name(pitch_type: str) -> str:
    return PITCH_NAMES.get(pitch_type, pitch_type)
