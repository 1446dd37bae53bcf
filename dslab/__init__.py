"""Classic data structures and algorithms, each with a console program."""

__version__ = "0.1.0"