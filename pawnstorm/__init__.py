"""Pawnstorm: rules engine and minimax bot for a simplified chess variant."""

__version__ = "1.0.0"
