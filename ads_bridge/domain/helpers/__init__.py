"""Domain helper functions."""
