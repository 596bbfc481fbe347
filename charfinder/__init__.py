"""charfinder: find Unicode characters by the words in their names."""

__version__ = "1.0.0"
