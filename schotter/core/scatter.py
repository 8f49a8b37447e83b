"""Static scatter: offsets recomputed from a freshly seeded generator.

Every call reseeds from ``config.random_seed``, so repeated calls with the
same seed give the same picture. The stones only jump when the seed or a
gain changes. This may have been meant for visual stability, or may just be
a generator that was never threaded across frames; either way the behaviour
is kept as-is.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from .config import AnimatorConfig
from .grid import GridLayout
from .state import PerturbationState, StoneTable

logger = logging.getLogger(__name__)

TARGET_LOW = np.array([-0.5, -0.5, -math.pi / 4], dtype=np.float64)
TARGET_HIGH = np.array([0.5, 0.5, math.pi / 4], dtype=np.float64)


def draw_targets(rng: np.random.Generator, factor: np.ndarray, config: AnimatorConfig) -> np.ndarray:
    """Random (x, y, rot) per cell, scaled by row factor and the current gains."""
    n = len(factor)
    raw = rng.uniform(TARGET_LOW, TARGET_HIGH, size=(n, 3))
    gains = np.array(
        [config.displacement_gain, config.displacement_gain, config.rotation_gain],
        dtype=np.float64,
    )
    return raw * factor[:, np.newaxis] * gains


def scatter(layout: GridLayout, config: AnimatorConfig) -> np.ndarray:
    config.validate()
    rng = np.random.default_rng(config.random_seed)
    return draw_targets(rng, layout.row_factors(), config)


class ScatterAnimator:
    """Persisted static scatter with the same interface as StoneAnimator."""

    def __init__(self, layout: GridLayout, config: AnimatorConfig):
        self.layout = layout
        self.config = config.validate()
        self.table = StoneTable(layout)
        self.tick = 0

    def set_config(self, config: AnimatorConfig) -> None:
        self.config = config.validate()
        logger.info("scatter config updated: %s", self.config)

    def advance(self, tick_index: int) -> None:
        self.tick = tick_index
        out = scatter(self.layout, self.config)
        self.table.offset[:] = out[:, :2]
        self.table.rotation[:] = out[:, 2]

    def state(self, index: int) -> PerturbationState:
        return self.table.record(index)

    def snapshot(self) -> np.ndarray:
        return self.table.snapshot()
