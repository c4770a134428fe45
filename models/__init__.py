"""
Data models for College Baseball Coach: players, pitches and position ratings.
"""
from .player import Player, Pitch, PositionRating, players_to_json, players_from_json
from .constants import POSITIONS, PITCH_TYPES, PITCH_NAMES, SKILL_ATTRIBUTES

__all__ = [
    "Player",
    "Pitch",
    "PositionRating",
    "players_to_json",
    "players_from_json",
    "POSITIONS",
    "PITCH_TYPES",
    "PITCH_NAMES",
    "SKILL_ATTRIBUTES",
]
