"""A simple document tree for HTML and XML tree builders, with plain-text renderings."""

__version__ = "0.1.0"
__all__ = ["dom", "printing"]