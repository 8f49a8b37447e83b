from __future__ import annotations


class ConfigError(ValueError):
    """Invalid layout or animator configuration. Never clamped silently."""


class InvariantViolation(RuntimeError):
    """Internal logic error, e.g. a zero tick count reaching a division."""
