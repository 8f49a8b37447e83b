from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import ConfigError

ROWS = 22
COLS = 12


@dataclass(frozen=True)
class GridLayout:
    rows: int = ROWS
    cols: int = COLS

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def positions(self) -> list[tuple[int, int]]:
        """(col, row) for every cell, row-major."""
        return [(col, row) for row in range(self.rows) for col in range(self.cols)]

    def bases(self) -> np.ndarray:
        """Cell coordinates as an (n, 2) float array of (x, y), row-major."""
        yy, xx = np.mgrid[0 : self.rows, 0 : self.cols]
        return np.stack([xx.ravel(), yy.ravel()], axis=1).astype(np.float64)

    def row_factors(self) -> np.ndarray:
        # row / rows; farther rows perturb more, row 0 not at all
        rows = np.repeat(np.arange(self.rows, dtype=np.float64), self.cols)
        return rows / self.rows


def configure(rows: int, cols: int) -> GridLayout:
    return GridLayout(rows, cols)


def positions(rows: int, cols: int) -> list[tuple[int, int]]:
    return configure(rows, cols).positions()
