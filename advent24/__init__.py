"""Solvers for nineteen days of December programming puzzles, one module per day."""

__version__ = "0.1.0"