"""Storage adapters for Vow Timer."""
