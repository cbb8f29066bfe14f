"""Texture, colour, line-reading, text and argument-checking helpers for a raycasting game."""

__version__ = "0.1.0"

__all__ = ["arguments", "chars", "colors", "lines", "textutils", "xpm"]