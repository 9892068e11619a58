"""termwordle: guess a hidden word in the terminal."""

__version__ = "1.0.0"
