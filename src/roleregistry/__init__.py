"""Organization-controlled role registry."""

__version__ = "0.1.0"
