"""
Procedural player generation for College Baseball Coach.
Every call takes an explicit random.Random so classes and rosters are reproducible from a seed.
"""
from .generate import (
    generate_player,
    generate_recruiting_class,
    generate_team_roster,
    prestige_star_weights,
    player_invariant_violations,
)
from .distributions import seed_rng
from .errors import InvalidArgumentError

__all__ = [
    "generate_player",
    "generate_recruiting_class",
    "generate_team_roster",
    "prestige_star_weights",
    "player_invariant_violations",
    "seed_rng",
    "InvalidArgumentError",
]
