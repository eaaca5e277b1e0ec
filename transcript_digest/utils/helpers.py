"""
Helper utility functions for the transcript digest application.
"""

import sys


def truncate_text(text: str, max_length: int = 120, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length, suffix included
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def count_words(text: str) -> int:
    """Count whitespace separated words, with no filtering."""
    return len(text.split())


def load_text(filepath: str) -> str:
    """
    Load a UTF-8 text file, or standard input when filepath is "-".

    A leading byte order mark is dropped.

    Args:
        filepath: Path to the file

    Returns:
        File contents
    """
    if filepath == "-":
        return sys.stdin.read()
    with open(filepath, 'r', encoding='utf-8-sig') as f:
        return f.read()

