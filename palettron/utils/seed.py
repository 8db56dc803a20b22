"""
Seeded random generators for deterministic palette shuffling.

``numpy.random.default_rng`` only takes non-negative integer entropy, so
every accepted seed kind is first reduced to one:

- non-negative ints are used as-is;
- negative ints are wrapped into the unsigned 64-bit range;
- floats with an integral value behave like the matching int;
- other floats and all strings are hashed (sha256) so the mapping is stable
  across interpreter runs, unlike ``hash()``.
"""
from __future__ import annotations

import hashlib
import logging
import numbers

import numpy as np

from ..types.color_types import Seed

logger = logging.getLogger(__name__)

_UINT64 = 2 ** 64


def _digest(text: str) -> int:
    return int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:8], "little")


def seed_to_int(seed: Seed) -> int:
    if isinstance(seed, bool):
        raise TypeError(f"Seed must be an int, float or str, got {type(seed).__name__}")
    if isinstance(seed, numbers.Integral):
        return int(seed) % _UINT64
    if isinstance(seed, numbers.Real):
        value = float(seed)
        if value.is_integer():
            return int(value) % _UINT64
        return _digest(repr(value))
    if isinstance(seed, str):
        return _digest(seed)
    raise TypeError(f"Seed must be an int, float or str, got {type(seed).__name__}")


def make_rng(seed: Seed) -> np.random.Generator:
    entropy = seed_to_int(seed)
    logger.debug("Seed %r -> entropy %d", seed, entropy)
    return np.random.default_rng(entropy)
