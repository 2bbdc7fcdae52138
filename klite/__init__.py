"""Sorting and selection, growable vectors, string building and Boyer-Moore search."""

__version__ = "0.1.0"
__all__ = ["ksort", "kvec", "kstring"]