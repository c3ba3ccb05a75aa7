"""lrun - race pace calculator CLI."""

from librunner import __version__

__all__ = ["__version__"]
