"""Plane geometry, lazy segment trees, number theory and shortest-path routines."""

__version__ = "0.1.0"