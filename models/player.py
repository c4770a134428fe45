"""
Player DTO for College Baseball Coach.
Every skill rating is 1-99. Records are frozen: a player is built whole by the generator
and only ever replaced, never edited in place.
"""
import json
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, Optional

from .constants import SKILL_ATTRIBUTES


@dataclass(frozen=True)
class Pitch:
    """One pitch in a repertoire. velocity is the 1-99 rating; mph is the true speed it came from."""

    type: str = "FF"
    velocity: int = 0
    control: int = 0
    movement: int = 0
    stuff: int = 0
    mph: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "velocity": self.velocity,
            "control": self.control,
            "movement": self.movement,
            "stuff": self.stuff,
            "mph": self.mph,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pitch":
        return cls(
            type=data["type"],
            velocity=int(data.get("velocity", 0)),
            control=int(data.get("control", 0)),
            movement=int(data.get("movement", 0)),
            stuff=int(data.get("stuff", 0)),
            mph=int(data.get("mph", data.get("velocity", 0))),
        )


@dataclass(frozen=True)
class PositionRating:
    position: str = ""
    rating: int = 0  # 1-99

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position, "rating": self.rating}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PositionRating":
        return cls(position=data["position"], rating=int(data.get("rating", 0)))


@dataclass(frozen=True)
class Player:
    """A recruit or rostered player. recruiting_stars is the nominal (scouted) rating."""

    id: str = ""
    # Biography
    first_name: str = ""
    last_name: str = ""
    birthdate: date = date(2000, 1, 1)
    year: str = "Freshman"
    preferred_position: str = ""  # specific position, or a broad category on imported records
    height: int = 0  # inches
    weight: int = 0  # lbs
    batting_hand: str = "Right"
    throwing_hand: str = "Right"
    nationality: str = "American"
    hometown: str = ""
    state: str = ""
    high_school: str = ""
    previous_school: Optional[str] = None  # transfers only
    jersey_number: int = 0
    agency: Optional[str] = None  # NIL representation
    team_id: Optional[int] = None
    # Scouting
    recruiting_stars: int = 1
    perfect_game_rating: float = 0.0  # 0-10
    # Mental
    ego: int = 0
    confidence: int = 0
    composure: int = 0
    greed: int = 0
    coachability: int = 0
    work_ethic: int = 0
    loyalty: int = 0
    intelligence: int = 0
    aggressiveness: int = 0
    integrity: int = 0
    leadership: int = 0
    adaptability: int = 0
    recovery: int = 0
    # Batting
    contact_vs_left: int = 0
    contact_vs_right: int = 0
    power_vs_left: int = 0
    power_vs_right: int = 0
    eye: int = 0
    discipline: int = 0
    defensiveness: int = 0  # bunting, hit-and-run
    ground_ball_rate: int = 0
    bunting_skill: int = 0
    # Pitching
    stamina: int = 0
    hold_runners: int = 0
    pitches: tuple[Pitch, ...] = field(default_factory=tuple)
    # Baserunning & fielding
    speed: int = 0
    stealing_ability: int = 0
    fielding_range: int = 0
    arm_strength: int = 0
    arm_accuracy: int = 0
    handling: int = 0
    blocking: int = 0  # mostly catchers
    position_ratings: tuple[PositionRating, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "birthdate": self.birthdate.isoformat(),
            "year": self.year,
            "preferred_position": self.preferred_position,
            "height": self.height,
            "weight": self.weight,
            "batting_hand": self.batting_hand,
            "throwing_hand": self.throwing_hand,
            "nationality": self.nationality,
            "hometown": self.hometown,
            "state": self.state,
            "high_school": self.high_school,
            "jersey_number": self.jersey_number,
            "recruiting_stars": self.recruiting_stars,
            "perfect_game_rating": self.perfect_game_rating,
        }
        for attr in SKILL_ATTRIBUTES:
            d[attr] = getattr(self, attr)
        d["pitches"] = [p.to_dict() for p in self.pitches]
        d["position_ratings"] = [r.to_dict() for r in self.position_ratings]
        if self.previous_school is not None:
            d["previous_school"] = self.previous_school
        if self.agency is not None:
            d["agency"] = self.agency
        if self.team_id is not None:
            d["team_id"] = self.team_id
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        skills = {attr: int(data.get(attr, 0)) for attr in SKILL_ATTRIBUTES}
        return cls(
            id=data["id"],
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            birthdate=date.fromisoformat(data["birthdate"]),
            year=data.get("year", "Freshman"),
            preferred_position=data.get("preferred_position", ""),
            height=data.get("height", 0),
            weight=data.get("weight", 0),
            batting_hand=data.get("batting_hand", "Right"),
            throwing_hand=data.get("throwing_hand", "Right"),
            nationality=data.get("nationality", "American"),
            hometown=data.get("hometown", ""),
            state=data.get("state", ""),
            high_school=data.get("high_school", ""),
            previous_school=data.get("previous_school"),
            jersey_number=data.get("jersey_number", 0),
            agency=data.get("agency"),
            team_id=data.get("team_id"),
            recruiting_stars=data.get("recruiting_stars", 1),
            perfect_game_rating=float(data.get("perfect_game_rating", 0.0)),
            pitches=tuple(Pitch.from_dict(p) for p in data.get("pitches", [])),
            position_ratings=tuple(PositionRating.from_dict(r) for r in data.get("position_ratings", [])),
            **skills,
        )


def players_to_json(players: list[Player], indent: int | None = None) -> str:
    """Export a list of players as a JSON array."""
    return json.dumps([p.to_dict() for p in players], indent=indent)


def players_from_json(text: str) -> list[Player]:
    """Import players from a JSON array produced by players_to_json."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of players")
    return [Player.from_dict(item) for item in data]
