"""orgtree: parse org-style outlines into trees and render them back.

Example:
    >>> from orgtree import OrgNode
    >>> root = OrgNode.from_lines(["Intro", "* A", "body", "** A1", "* B"])
    >>> [child.heading for child in root.children]
    ['A', 'B']
    >>> root.to_lines()
    ['Intro', '* A', 'body', '** A1', '* B']
"""

from orgtree.org.classifier import HEADING_MARKER, classify_line, is_heading
from orgtree.org.parser import OrgNode, build_tree
from orgtree.org.renderer import render_heading, render_lines, render_text
from orgtree.services.file_operations import read_lines, write_lines

__version__ = "0.1.0"

__all__ = [
    "HEADING_MARKER",
    "OrgNode",
    "build_tree",
    "classify_line",
    "is_heading",
    "read_lines",
    "render_heading",
    "render_lines",
    "render_text",
    "write_lines",
]
