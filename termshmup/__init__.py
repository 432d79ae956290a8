"""A terminal shoot-'em-up played on ASCII maps, with a curses front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]