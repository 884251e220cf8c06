"""C-style character, memory, string, linked-list, output and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "linkedlist", "transform", "printf"]