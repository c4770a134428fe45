"""
College Baseball Coach: Flask app.
JSON endpoints over the player generation engine: recruiting classes, team rosters, import/export.
"""
import logging
import random

from flask import Flask, jsonify, request

from config import get_settings
from generation import (
    generate_recruiting_class,
    generate_team_roster,
    player_invariant_violations,
    seed_rng,
    InvalidArgumentError,
)
from models import Player, PITCH_NAMES, POSITIONS
from models.constants import POSITION_NAMES
from models.ratings import best_positions, formatted_height, player_age

settings = get_settings()

app = Flask(__name__)
app.secret_key = settings.secret_key

logger = logging.getLogger(__name__)


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from None


def _float_arg(name: str, default: float) -> float:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be a number, got {raw!r}") from None


def _seeded_rng() -> tuple[int, random.Random]:
    """Seed from ?seed=, then GENERATION_SEED, else a fresh one. Returned so the client can replay."""
    seed = seed_rng(request.args.get("seed") or settings.generation_seed)
    return seed, random.Random(seed)


def _player_payload(player: Player) -> dict:
    """Export dict plus read-only display fields (ignored on import)."""
    d = player.to_dict()
    d["name"] = player.name
    d["age"] = player_age(player.birthdate)
    d["height_display"] = formatted_height(player.height)
    d["best_positions"] = [{"position": pos, "rating": r} for pos, r in best_positions(player)]
    return d


@app.errorhandler(InvalidArgumentError)
def handle_invalid_argument(err: InvalidArgumentError):
    return jsonify({"error": str(err)}), 400


@app.route("/")
def index():
    return jsonify({
        "name": settings.app_name,
        "endpoints": [
            "/api/recruiting-class",
            "/api/team/<team_id>/roster",
            "/api/players/import",
            "/api/pitch-types",
            "/api/positions",
        ],
    })


@app.route("/api/recruiting-class")
def api_recruiting_class():
    """Generate an open-market recruiting class: ?count=&seed="""
    count = _int_arg("count", settings.default_class_size)
    seed, rng = _seeded_rng()
    players = generate_recruiting_class(count, rng=rng, star_weights=settings.recruit_star_weights)
    logger.info("Recruiting class: %d players, seed %s", len(players), seed)
    return jsonify({"seed": seed, "players": [_player_payload(p) for p in players]})


@app.route("/api/team/<int:team_id>/roster")
def api_team_roster(team_id: int):
    """Generate a roster for a team: ?prestige=&count=&seed="""
    prestige = _float_arg("prestige", 50.0)
    count = _int_arg("count", settings.default_roster_size)
    seed, rng = _seeded_rng()
    players = generate_team_roster(
        team_id, prestige, count, rng=rng, star_weights=settings.recruit_star_weights,
    )
    logger.info("Team %d roster: %d players, prestige %s, seed %s", team_id, len(players), prestige, seed)
    return jsonify({
        "seed": seed,
        "team_id": team_id,
        "prestige": prestige,
        "players": [_player_payload(p) for p in players],
    })


@app.route("/api/players/import", methods=["POST"])
def api_import_players():
    """Parse an exported player list and echo it back normalised, flagging any broken invariants."""
    data = request.get_json(silent=True)
    if not isinstance(data, list):
        return jsonify({"error": "Expected a JSON array of players"}), 400
    invalid = {}
    try:
        players = [Player.from_dict(item) for item in data]
        for p in players:
            problems = player_invariant_violations(p)
            if problems:
                invalid[p.id] = problems
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"error": f"Invalid player record: {e}"}), 400
    return jsonify({
        "count": len(players),
        "players": [p.to_dict() for p in players],
        "invalid": invalid,
    })


@app.route("/api/pitch-types")
def api_pitch_types():
    return jsonify(PITCH_NAMES)


@app.route("/api/positions")
def api_positions():
    return jsonify([{"code": pos, "name": POSITION_NAMES[pos]} for pos in POSITIONS])


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=settings.debug, port=5000)
