"""Interactive terminal UI for Vow Timer."""
