"""Line-list helpers shared by the normalization stages."""
from typing import List, Sequence

LINE_SEPARATOR = "\n"


def split_lines(text: str) -> List[str]:
    """Split text on newlines only. An empty string yields a single empty line."""
    return text.split(LINE_SEPARATOR)


def join_lines(lines: Sequence[str]) -> str:
    """Join lines back into a single string."""
    return LINE_SEPARATOR.join(lines)


def squish_lines(head: Sequence[str], tail: Sequence[str]) -> List[str]:
    """
    Merge two line lists, gluing the first line of tail onto the last line of head.

    Args:
        head: Lines accumulated so far (may be empty)
        tail: Lines to append (must contain at least one line)

    Returns:
        New list; neither input is modified

    Example:
        squish_lines(["a", "b"], ["c", "d"]) -> ["a", "bc", "d"]
    """
    first, *rest = tail
    last = head[-1] if head else ""
    return [*head[:-1], last + first, *rest]
