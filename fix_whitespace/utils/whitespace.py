"""Whitespace classification primitives.

Only the space character counts as indentation. Tabs and other whitespace
characters are treated like any other content.
"""
from fix_whitespace.utils.lines import split_lines

INDENT_CHARACTERS = frozenset(" ")


def is_whitespace_character(char: str) -> bool:
    """Check whether a single character counts as indentation."""
    return char in INDENT_CHARACTERS


def whitespace_at_beginning(line: str) -> int:
    """
    Count the indentation characters at the start of a line.

    Args:
        line: Single line of text (no newlines)

    Returns:
        Number of leading spaces, or len(line) if the line is whitespace-only
    """
    for index, char in enumerate(line):
        if not is_whitespace_character(char):
            return index
    return len(line)


def is_only_whitespace(line: str) -> bool:
    """Check whether a line consists solely of spaces (the empty line included)."""
    return whitespace_at_beginning(line) == len(line)


def min_indentation(text: str) -> int:
    """
    Get the smallest indentation among the non-blank lines of a multi-line string.

    Args:
        text: Multi-line string

    Returns:
        Minimum leading-space count, or 0 if every line is blank

    Example:
        "    Hi\\n      There\\n  \\n    Friendo!" -> 4
        (the two-space line is blank and is ignored)
    """
    indents = [
        whitespace_at_beginning(line)
        for line in split_lines(text)
        if not is_only_whitespace(line)
    ]
    return min(indents) if indents else 0
