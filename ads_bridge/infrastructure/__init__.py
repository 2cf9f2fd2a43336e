"""Infrastructure layer for the ADS variable bridge."""
