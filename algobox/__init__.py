"""Classic algorithms and data structures for study and practice."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "circular_deque",
    "crc",
    "graphs",
    "linked_list",
    "number_theory",
    "rover",
    "searching",
    "sequences",
    "stacks",
    "trees",
]