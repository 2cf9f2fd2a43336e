"""Presentation layer: dependency wiring."""
