"""Deterministic, seed-driven generation of universes, galaxies and star systems."""

__version__ = "0.1.0"
