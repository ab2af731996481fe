"""Small utilities for characters, buffers, strings, linked lists, output and line reading."""

__version__ = "0.1.0"
__all__ = ["convert", "memory", "strings", "linked", "output", "printf", "lines"]