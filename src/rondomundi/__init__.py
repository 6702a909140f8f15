"""Rondo Mundi: in-memory ticket lottery service."""

__version__ = "0.1.0"
