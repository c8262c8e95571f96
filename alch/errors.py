"""Errors raised by alch."""


class AlchError(Exception):
    """Base class for alch errors."""
    pass


class DisplayConfigError(AlchError):
    """Display capabilities were configured twice with different values."""
    pass


class ColorListError(AlchError, IndexError):
    """Index does not refer to a color in the list."""
    pass
