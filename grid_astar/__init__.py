"""Incremental A* search on a walled grid."""

__version__ = "0.1.0"
