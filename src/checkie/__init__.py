"""Checkie: a checkers rules engine behind a small game-session HTTP service."""

__version__ = "0.1.0"
