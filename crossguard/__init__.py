"""Crossing-guard arcade game: guide children across a busy road, drawn with pygame."""

__version__ = "0.1.0"