"""Timed sliding-tile puzzle."""

__version__ = "0.1.0"
