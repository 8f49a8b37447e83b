from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

SNOW = (255, 250, 250)
BLACK = (0, 0, 0)

# unit square corners, closed
_SQUARE = np.array([[-0.5, -0.5], [0.5, -0.5], [0.5, 0.5], [-0.5, 0.5], [-0.5, -0.5]])


def canvas_size(cols: int, rows: int, size: int = 30, margin: int = 35) -> Tuple[int, int]:
    return cols * size + 2 * margin, rows * size + 2 * margin


def stone_outline(x: float, y: float, rotation: float, size: int, margin: int) -> list[tuple[float, float]]:
    c, s = math.cos(rotation), math.sin(rotation)
    rot = np.array([[c, -s], [s, c]])
    pts = _SQUARE @ rot.T
    pts = (pts + [x + 0.5, y + 0.5]) * size + margin
    return [(float(px), float(py)) for px, py in pts]


def draw_stones(
    snapshot: np.ndarray,
    cols: int,
    rows: int,
    size: int = 30,
    margin: int = 35,
    line_width: float = 0.06,
    bg_color: Tuple[int, int, int] = SNOW,
    color: Tuple[int, int, int] = BLACK,
) -> Image.Image:
    """Outline every stone of a snapshot. Row 0 is drawn at the top."""
    W, H = canvas_size(cols, rows, size, margin)
    img = Image.new("RGB", (W, H), color=bg_color)
    draw = ImageDraw.Draw(img)
    width = max(1, int(round(line_width * size)))
    for base_x, base_y, off_x, off_y, rotation in np.asarray(snapshot, dtype=np.float64):
        pts = stone_outline(base_x + off_x, base_y + off_y, rotation, size, margin)
        draw.line(pts, fill=color, width=width, joint="curve")
    return img
