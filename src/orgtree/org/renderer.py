"""Org outline renderer.

Rendering is the inverse of ``build_tree``: headings come out with exactly
``depth`` markers, followed by their content lines and then their children,
in document order. Re-parsing a rendered tree gives an equal tree.
"""

from orgtree.org.classifier import HEADING_MARKER
from orgtree.org.parser import OrgNode


def render_heading(node: OrgNode, marker: str = HEADING_MARKER) -> str:
    """Render the heading line of a node.

    The root (depth 0) has no heading line and renders as an empty string.
    An empty title still gets the separating space, e.g. ``"** "``.
    """
    if node.depth == 0:
        return ""
    return f"{marker * node.depth} {node.heading}"


def render_lines(node: OrgNode, marker: str = HEADING_MARKER) -> list[str]:
    """Render a subtree to lines.

    Args:
        node: Subtree to render (usually the document root)
        marker: Heading marker character

    Returns:
        Lines without terminators, in document order
    """
    lines = []
    stack = [node]

    while stack:
        current = stack.pop()

        if current.depth > 0:
            lines.append(render_heading(current, marker))

        lines.extend(current.content)

        # Reversed so the first child is rendered first
        stack.extend(reversed(current.children))

    return lines


def render_text(node: OrgNode, marker: str = HEADING_MARKER) -> str:
    """Render a subtree as display text (no trailing newline)."""
    return "\n".join(render_lines(node, marker))
