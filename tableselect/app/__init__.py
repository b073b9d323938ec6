"""Application layer: per-table state objects wiring the core together."""
