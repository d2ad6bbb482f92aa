"""A small raster paint program: drawing tools, a canvas with undo history, and a Tk window."""

__version__ = "0.1.0"
__all__ = ["__version__"]