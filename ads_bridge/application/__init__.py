"""Application layer for the ADS variable bridge."""
