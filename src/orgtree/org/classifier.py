"""Heading line classification for org outlines.

A heading line starts with one or more marker characters (``*`` by default).
The number of leading markers is the heading level; everything else is an
opaque content line (level 0).
"""

HEADING_MARKER = "*"


def classify_line(line: str, marker: str = HEADING_MARKER) -> tuple[str, int]:
    """Split a line into its heading title and heading level.

    Args:
        line: Single line of text, without its line terminator
        marker: Heading marker character

    Returns:
        Tuple of (title, level). Level 0 means the line is content and the
        title should be ignored.

    Examples:
        >>> classify_line("* Test")
        ('Test', 1)
        >>> classify_line("***Test")
        ('Test', 3)
        >>> classify_line("*****")
        ('', 5)
        >>> classify_line("Test")
        ('Test', 0)
    """
    level = len(line) - len(line.lstrip(marker))
    return line[level:].strip(), level


def is_heading(line: str, marker: str = HEADING_MARKER) -> bool:
    """Return True if the line starts with at least one heading marker."""
    return line.startswith(marker)
