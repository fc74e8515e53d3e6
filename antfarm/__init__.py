"""Route ants through a farm of rooms in the fewest turns."""

__version__ = "0.1.0"
__all__ = ["__version__"]