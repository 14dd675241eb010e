"""Algorithms and data structures for competitive programming, with a tolerant real-number output comparison."""

__version__ = "0.1.0"