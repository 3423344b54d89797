"""A red-and-blue sequence memory game: model, screen state and Tk window."""

__version__ = "0.1.0"
__all__ = ["__version__"]