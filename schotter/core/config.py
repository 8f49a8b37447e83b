from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np

from .errors import ConfigError

logger = logging.getLogger(__name__)

# slider limits + arrow-key step of the interactive sketches
DISPLACEMENT_RANGE = (0.0, 5.0)
ROTATION_RANGE = (0.0, 5.0)
MOTION_RANGE = (0.0, 1.0)
GAIN_STEP = 0.1

SEED_LIMIT = 1_000_000
MAX_SEED = 2**64


@dataclass(frozen=True)
class AnimatorConfig:
    displacement_gain: float = 1.0
    rotation_gain: float = 1.0
    motion_probability: float = 0.5
    random_seed: int = 0
    tick_range: Tuple[int, int] = (50, 300)

    def validate(self) -> "AnimatorConfig":
        for name in ("displacement_gain", "rotation_gain"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value < 0.0:
                raise ConfigError(f"{name} must be a finite value >= 0, got {value!r}")
        p = float(self.motion_probability)
        if not 0.0 <= p <= 1.0:
            raise ConfigError(f"motion_probability must lie in [0, 1], got {p!r}")
        seed = self.random_seed
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
            raise ConfigError(f"random_seed must be an integer, got {seed!r}")
        if not 0 <= int(seed) < MAX_SEED:
            raise ConfigError(f"random_seed must fit in an unsigned 64-bit integer, got {seed}")
        lo, hi = self.tick_range
        if int(lo) < 1:
            raise ConfigError(f"tick_range must exclude zero, got {self.tick_range}")
        if int(hi) <= int(lo):
            raise ConfigError(f"tick_range is empty: {self.tick_range}")
        return self

    def with_seed(self, seed: int) -> "AnimatorConfig":
        return replace(self, random_seed=seed)


def fresh_seed(rng: Optional[np.random.Generator] = None) -> int:
    """Pick a new seed the way the "R" key does. The old sequence is not recoverable."""
    rng = rng if rng is not None else np.random.default_rng()
    return int(rng.integers(0, SEED_LIMIT))


def nudge(config: AnimatorConfig, displacement: float = 0.0, rotation: float = 0.0) -> AnimatorConfig:
    """Shift the gains by small steps. Decrements stop once a gain hits zero."""

    def _step(value: float, delta: float) -> float:
        if delta < 0 and value <= 0.0:
            return value
        return max(0.0, value + delta)

    out = replace(
        config,
        displacement_gain=_step(config.displacement_gain, displacement),
        rotation_gain=_step(config.rotation_gain, rotation),
    )
    logger.debug("gains now %.2f / %.2f", out.displacement_gain, out.rotation_gain)
    return out
