"""Velocity-based settle/transition model.

Each stone alternates between resting and gliding toward a random target.
At a decision point (``remaining_ticks == 0``) one uniform draw picks the
phase: above ``motion_probability`` the stone rests, otherwise it picks a
new target and a tick count and moves there linearly. The decision tick
itself does not move the stone. Arrival is not snapped onto the target, so
float accumulation error is left in place.

Gain changes only reach stones at their next decision point; stones already
in flight keep the velocity they were given.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from .config import AnimatorConfig, fresh_seed
from .errors import InvariantViolation
from .grid import GridLayout
from .scatter import draw_targets, scatter
from .state import PerturbationState, StoneTable

logger = logging.getLogger(__name__)


class StoneAnimator:
    def __init__(self, layout: GridLayout, config: AnimatorConfig):
        self.layout = layout
        self.config = config.validate()
        self.table = StoneTable(layout)
        self.rng = np.random.default_rng(self.config.random_seed)
        self.tick = 0

    def set_config(self, config: AnimatorConfig) -> None:
        config.validate()
        if config.random_seed != self.config.random_seed:
            # in-flight stones are left alone; only later draws change
            self.rng = np.random.default_rng(config.random_seed)
            logger.info("reseeded with %d", config.random_seed)
        self.config = config
        logger.info(
            "config: displacement=%.2f rotation=%.2f motion=%.2f",
            config.displacement_gain,
            config.rotation_gain,
            config.motion_probability,
        )

    def reseed(self, seed: Optional[int] = None) -> int:
        """Swap in a new seed (a fresh random one by default) and return it."""
        seed = fresh_seed() if seed is None else seed
        self.set_config(self.config.with_seed(seed))
        return seed

    def advance(self, tick_index: int) -> None:
        t = self.table
        self.tick = tick_index

        moving = t.remaining > 0
        t.offset[moving] += t.velocity[moving, :2]
        t.rotation[moving] += t.velocity[moving, 2]
        t.remaining[moving] -= 1

        deciding = np.flatnonzero(~moving)
        if deciding.size == 0:
            return
        cfg = self.config
        lo, hi = cfg.tick_range
        u = self.rng.random(deciding.size)
        rest = deciding[u > cfg.motion_probability]
        go = deciding[u <= cfg.motion_probability]

        t.velocity[rest] = 0.0
        t.remaining[rest] = self.rng.integers(lo, hi, size=rest.size)

        if go.size:
            targets = draw_targets(self.rng, t.factor[go], cfg)
            ticks = self.rng.integers(lo, hi, size=go.size)
            if np.any(ticks <= 0):
                raise InvariantViolation(f"drew a zero tick count from {cfg.tick_range}")
            current = np.column_stack([t.offset[go], t.rotation[go]])
            t.velocity[go] = (targets - current) / ticks[:, np.newaxis]
            t.remaining[go] = ticks

        logger.debug("tick %d: %d resting, %d moving", tick_index, rest.size, go.size)

    def scatter(self) -> None:
        """Jump every stone to a fresh static scatter and drop all motion."""
        out = scatter(self.layout, self.config)
        self.table.offset[:] = out[:, :2]
        self.table.rotation[:] = out[:, 2]
        self.table.clear_motion()

    def state(self, index: int) -> PerturbationState:
        return self.table.record(index)

    def counts(self) -> Tuple[int, int]:
        """(moving, resting) over the stones currently inside a phase."""
        t = self.table
        active = t.remaining > 0
        still = np.all(t.velocity == 0.0, axis=1)
        return int(np.sum(active & ~still)), int(np.sum(active & still))

    def snapshot(self) -> np.ndarray:
        return self.table.snapshot()


def new_animator(layout: GridLayout, config: AnimatorConfig) -> StoneAnimator:
    return StoneAnimator(layout, config)
