"""
App settings, read from the environment (and a local .env file if present).
Generation tables themselves live in models.constants; these only pick defaults and overrides.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def parse_star_weights(raw: str | None) -> dict[int, float] | None:
    """'1:20,2:30,3:35,4:12,5:3' -> {1: 20.0, ...}. Empty or missing -> None (use the built-in table)."""
    if raw is None or raw.strip() == "":
        return None
    weights: dict[int, float] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        stars, _, weight = item.partition(":")
        if not weight:
            raise ValueError(f"Bad star weight entry {item!r}; expected stars:weight")
        weights[int(stars)] = float(weight)
    return weights


@dataclass
class Settings:
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "College Baseball Coach"))
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "dev-secret-change-in-production"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    generation_seed: str | None = field(default_factory=lambda: os.getenv("GENERATION_SEED") or None)
    default_class_size: int = field(default_factory=lambda: _env_int("DEFAULT_CLASS_SIZE", 25))
    default_roster_size: int = field(default_factory=lambda: _env_int("DEFAULT_ROSTER_SIZE", 35))
    recruit_star_weights: dict[int, float] | None = field(
        default_factory=lambda: parse_star_weights(os.getenv("RECRUIT_STAR_WEIGHTS"))
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance sourced from environment variables."""
    return Settings()
