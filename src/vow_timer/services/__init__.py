"""Business services for Vow Timer."""
