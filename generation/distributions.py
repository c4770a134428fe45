"""
Random-distribution primitives shared by every generator.
All draws go through an explicit random.Random so a seeded run is reproducible.
"""
import random
import zlib
from datetime import date, timedelta
from typing import Hashable, Mapping, TypeVar

from .errors import InvalidArgumentError

K = TypeVar("K", bound=Hashable)


def seed_rng(seed: int | str | None) -> int:
    """
    Integer seed for a run. None draws a fresh one, returned so it can be logged.
    Strings that int() accepts are used as is; other strings are hashed with crc32.
    """
    if seed is None:
        return random.randint(0, 2**31 - 1)
    if isinstance(seed, str):
        try:
            return int(seed)
        except ValueError:
            # crc32 rather than hash(): str hashing is salted per process
            return zlib.crc32(seed.encode("utf-8")) % (2**31)
    return int(seed)


def child_rng(rng: random.Random) -> random.Random:
    """Independent stream for one player, seeded from the parent."""
    return random.Random(rng.getrandbits(64))


def weighted_choice(options: Mapping[K, float], rng: random.Random) -> K:
    """
    Pick one key with probability proportional to its weight.
    Keys are scanned in mapping order against a single uniform draw, so with weights
    summing to 1 the draw is compared directly against cumulative thresholds.
    """
    if not options:
        raise InvalidArgumentError("weighted_choice needs at least one option")
    total = 0.0
    for key, weight in options.items():
        if weight < 0:
            raise InvalidArgumentError(f"weight for {key!r} must be >= 0, got {weight}")
        total += weight
    if total <= 0:
        raise InvalidArgumentError("weights must sum to a positive value")
    remaining = rng.random() * total
    last = None
    for key, weight in options.items():
        remaining -= weight
        if remaining < 0:
            return key
        if weight > 0:
            last = key
    # float rounding: fall back to the last key that could have been chosen
    return last


def sample_without_replacement(options: Mapping[K, float], k: int, rng: random.Random) -> list[K]:
    """k distinct keys, each drawn with weighted_choice from what is left."""
    pool = dict(options)
    picked: list[K] = []
    while len(picked) < k and any(w > 0 for w in pool.values()):
        key = weighted_choice(pool, rng)
        picked.append(key)
        del pool[key]
    return picked


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def random_date(start: date, end: date, rng: random.Random) -> date:
    """Uniform date in [start, end]."""
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, max(0, span)))
