"""Schotter: a grid of stones nudged out of place by seeded noise.

The host drives everything through three calls on an animator:
``advance(tick)``, ``snapshot()`` and ``set_config(config)``.
"""
from __future__ import annotations

from .core.animator import StoneAnimator, new_animator
from .core.config import AnimatorConfig
from .core.errors import ConfigError, InvariantViolation
from .core.grid import GridLayout, configure
from .core.scatter import ScatterAnimator, scatter

__all__ = [
    "AnimatorConfig",
    "ConfigError",
    "GridLayout",
    "InvariantViolation",
    "ScatterAnimator",
    "StoneAnimator",
    "configure",
    "new_animator",
    "scatter",
]
