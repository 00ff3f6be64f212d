"""Typed atoms, vectors and verb kernels for a K9-style array language."""

__version__ = "0.1.0"