"""Core perturbation primitives for Schotter.

Modules:
- grid: fixed lattice of stone base positions
- config: animator tunables + validation
- state: per-stone perturbation arena
- scatter: one-shot seeded scatter (static tiers)
- animator: velocity-based settle/transition model
"""
