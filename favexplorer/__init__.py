"""Favorites tree, its data file, and a directory listing model with history."""

__version__ = "0.1.0"