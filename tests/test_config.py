import math

import numpy as np
import pytest

from schotter import AnimatorConfig, ConfigError
from schotter.core.config import SEED_LIMIT, fresh_seed, nudge


def test_defaults_are_valid():
    cfg = AnimatorConfig()
    assert cfg.validate() is cfg
    assert cfg.tick_range == (50, 300)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"motion_probability": -0.1},
        {"motion_probability": 1.01},
        {"motion_probability": math.nan},
        {"displacement_gain": -1.0},
        {"rotation_gain": math.inf},
        {"random_seed": -1},
        {"random_seed": 2**64},
        {"random_seed": 1.5},
        {"tick_range": (0, 300)},
        {"tick_range": (10, 10)},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ConfigError):
        AnimatorConfig(**kwargs).validate()


def test_probability_bounds_are_inclusive():
    AnimatorConfig(motion_probability=0.0).validate()
    AnimatorConfig(motion_probability=1.0).validate()


def test_largest_seed_is_accepted():
    AnimatorConfig(random_seed=2**64 - 1).validate()


def test_nudge_steps_gains():
    cfg = nudge(AnimatorConfig(), displacement=0.1, rotation=-0.1)
    assert cfg.displacement_gain == pytest.approx(1.1)
    assert cfg.rotation_gain == pytest.approx(0.9)


def test_nudge_never_goes_below_zero():
    cfg = AnimatorConfig(displacement_gain=0.05, rotation_gain=0.0)
    cfg = nudge(cfg, displacement=-0.1, rotation=-0.1)
    assert cfg.displacement_gain == 0.0
    assert cfg.rotation_gain == 0.0


def test_fresh_seed_in_range_and_reproducible_with_rng():
    a = fresh_seed(np.random.default_rng(3))
    b = fresh_seed(np.random.default_rng(3))
    assert a == b
    assert 0 <= a < SEED_LIMIT
