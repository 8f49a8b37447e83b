"""Host-side helpers (rasterising snapshots)."""
