"""C-style character, number, string, memory, linked-list, output and printf helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "memory",
    "strings",
    "lists",
    "output",
    "conversions",
    "printf",
    "printf_flags",
]