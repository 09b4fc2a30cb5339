"""Exceptions raised by the christmastree application."""


class ChristmasTreeError(Exception):
    """Base class for application errors."""


class WindowCreationError(ChristmasTreeError):
    """The drawing surface or main window could not be acquired at startup."""
