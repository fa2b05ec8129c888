"""A terminal arcade shooter built on a small actor, level, quadtree and rendering engine."""

__version__ = "0.1.0"
__all__ = ["__version__"]