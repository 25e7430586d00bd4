"""Scrap Hunter: a turn-based grid exploration simulation."""

__version__ = "0.1.0"
