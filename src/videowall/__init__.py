"""Video wall cabinet grid calculator."""

__version__ = "1.0.0"
