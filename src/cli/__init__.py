"""measure - display fitness measurements from the terminal."""

from measurements import __version__

__all__ = ["__version__"]
