from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .grid import GridLayout


@dataclass(frozen=True)
class PerturbationState:
    """Read-only copy of one stone's record."""

    base: Tuple[float, float]
    offset: Tuple[float, float]
    rotation: float
    velocity: Tuple[float, float, float]
    remaining_ticks: int

    @property
    def resting(self) -> bool:
        return self.velocity == (0.0, 0.0, 0.0)


class StoneTable:
    """Per-stone state stored column-wise, indexed by row-major cell index."""

    def __init__(self, layout: GridLayout):
        n = layout.size
        self.base = layout.bases()
        self.base.setflags(write=False)
        self.factor = layout.row_factors()
        self.factor.setflags(write=False)
        self.offset = np.zeros((n, 2), dtype=np.float64)
        self.rotation = np.zeros(n, dtype=np.float64)
        self.velocity = np.zeros((n, 3), dtype=np.float64)
        self.remaining = np.zeros(n, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.rotation)

    def clear_motion(self) -> None:
        self.velocity[:] = 0.0
        self.remaining[:] = 0

    def record(self, index: int) -> PerturbationState:
        vx, vy, vr = (float(v) for v in self.velocity[index])
        return PerturbationState(
            base=(float(self.base[index, 0]), float(self.base[index, 1])),
            offset=(float(self.offset[index, 0]), float(self.offset[index, 1])),
            rotation=float(self.rotation[index]),
            velocity=(vx, vy, vr),
            remaining_ticks=int(self.remaining[index]),
        )

    def snapshot(self) -> np.ndarray:
        # columns: base_x, base_y, offset_x, offset_y, rotation
        return np.column_stack([self.base, self.offset, self.rotation])
