"""Noughts and crosses: pure game engine, heuristic opponent, Qt session."""

__version__ = "0.1.0"
