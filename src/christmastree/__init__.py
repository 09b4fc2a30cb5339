"""Animated Christmas tree with twinkling lights and falling snow."""

__version__ = "0.1.0"
