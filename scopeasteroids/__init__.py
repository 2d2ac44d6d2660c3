"""Vector Asteroids drawn on an oscilloscope through the sound card, or in a pygame window."""

__version__ = "0.1.0"

__all__ = ["__version__"]