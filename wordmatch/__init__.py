"""wordmatch: filter candidate words against positional-match clues."""

__version__ = "0.1.0"
