"""Chess position model with a pseudo-legal move checker."""

__version__ = "0.1.0"
