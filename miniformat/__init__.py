"""C-style character, byte-buffer and string helpers with a minimal printf-like formatter."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "formatting"]