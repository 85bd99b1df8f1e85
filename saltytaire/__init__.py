"""Klondike solitaire with a pixel-art table, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]