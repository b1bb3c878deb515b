"""Classic algorithms, data structures and short programming-contest exercises."""

__version__ = "0.1.0"