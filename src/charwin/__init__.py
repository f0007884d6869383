"""charwin — interactive character-grid drawing console."""

__version__ = "0.1.0"
