"""Org outline parser.

This module handles parsing of org-style outlines, where each heading line
starts with a run of ``*`` markers giving its nesting depth and every other
line is opaque content owned by the nearest preceding heading.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Sequence, Union

import structlog

from orgtree.org.classifier import HEADING_MARKER, classify_line

if TYPE_CHECKING:
    from orgtree.models.config import Config
    from orgtree.services.file_monitor import FileMonitor

logger = structlog.get_logger()


@dataclass
class OrgNode:
    """Subtree of an org outline.

    The document itself is a synthetic root node with depth 0 and no heading
    line of its own. Every heading in the document becomes a child node one
    level deeper than its parent.

    Attributes:
        depth: Nesting depth (number of markers in the rendered heading)
        heading: Heading title without markers or surrounding whitespace
        content: Lines directly under the heading, before the first child
        children: Child subtrees in document order
    """

    depth: int = 0
    heading: str = ""
    content: list[str] = field(default_factory=list)
    children: list["OrgNode"] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Sequence[str], marker: str = HEADING_MARKER) -> "OrgNode":
        """Parse a sequence of lines into a root node."""
        return build_tree(lines, marker)

    @classmethod
    def parse(cls, text: str, marker: str = HEADING_MARKER) -> "OrgNode":
        """Parse org text into a root node.

        The text is split on newlines only. An empty string parses to an
        empty root.

        Args:
            text: Org document text
            marker: Heading marker character

        Returns:
            Root node of the parsed outline
        """
        if not text:
            return cls()
        return build_tree(text.split("\n"), marker)

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional["Config"] = None) -> "OrgNode":
        """Read and parse an org file.

        Args:
            path: Path to the org file
            config: Optional configuration (marker and encoding)

        Returns:
            Root node of the parsed outline

        Raises:
            OSError: If the file cannot be read
        """
        from orgtree.models.config import Config
        from orgtree.services.file_operations import read_lines

        config = config or Config()
        lines = read_lines(path, encoding=config.files.encoding)
        return build_tree(lines, config.parser.marker)

    def to_lines(self, marker: str = HEADING_MARKER) -> list[str]:
        """Render this subtree to lines (see ``orgtree.org.renderer``)."""
        from orgtree.org.renderer import render_lines

        return render_lines(self, marker)

    def render(self, marker: str = HEADING_MARKER) -> str:
        """Render this subtree as newline-joined text without a final newline."""
        from orgtree.org.renderer import render_text

        return render_text(self, marker)

    def to_file(
        self,
        path: Union[str, Path],
        config: Optional["Config"] = None,
        file_monitor: Optional["FileMonitor"] = None,
    ) -> None:
        """Render this subtree and write it to a file.

        Args:
            path: Destination path
            config: Optional configuration (marker and encoding)
            file_monitor: Optional FileMonitor for concurrent modification detection

        Raises:
            OSError: If the file cannot be written
        """
        from orgtree.models.config import Config
        from orgtree.services.file_operations import write_lines

        config = config or Config()
        write_lines(
            path,
            self.to_lines(config.parser.marker),
            encoding=config.files.encoding,
            file_monitor=file_monitor,
        )

    def full_heading(self, marker: str = HEADING_MARKER) -> str:
        """Heading line including markers; empty for the root."""
        from orgtree.org.renderer import render_heading

        return render_heading(self, marker)

    def __str__(self) -> str:
        return self.render()

    def add_child(self, heading: str, position: Optional[int] = None) -> "OrgNode":
        """Add a child heading one level below this node.

        Args:
            heading: Title of the new heading
            position: Optional index to insert at (None = append to end)

        Returns:
            The created child node
        """
        child = OrgNode(depth=self.depth + 1, heading=heading)

        if position is None:
            self.children.append(child)
        else:
            self.children.insert(position, child)

        return child

    def walk(self) -> Iterator["OrgNode"]:
        """Yield this node and all descendants in document (pre-)order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_heading(self, text: str) -> Optional["OrgNode"]:
        """Find the first descendant whose heading contains text.

        Args:
            text: Text to search for (case-insensitive)

        Returns:
            Node if found, None otherwise
        """
        needle = text.lower()
        for node in self.walk():
            if node is not self and needle in node.heading.lower():
                return node
        return None

    def get_keyword(self, key: str) -> Optional[str]:
        """Get the value of a ``#+KEY: value`` line in this node's content.

        Examples:
            >>> root.get_keyword("title")
            'My Document'
            >>> root.get_keyword("missing")
            None
        """
        for line in self.content:
            parsed = _parse_keyword(line)
            if parsed and parsed[0].lower() == key.lower():
                return parsed[1]
        return None

    def set_keyword(self, key: str, value: str) -> None:
        """Set a keyword value, updating the existing line in place or appending one."""
        for i, line in enumerate(self.content):
            parsed = _parse_keyword(line)
            if parsed and parsed[0].lower() == key.lower():
                # Keep the original spelling of the key
                self.content[i] = f"#+{parsed[0]}: {value}"
                return

        self.content.append(f"#+{key.upper()}: {value}")


def build_tree(lines: Sequence[str], marker: str = HEADING_MARKER) -> OrgNode:
    """Build an outline tree from lines.

    Content lines attach to the most recently opened heading (or the root).
    A heading of level L closes every open node whose depth is L or more,
    then opens a new child one level below the remaining innermost node.
    A heading that skips levels (``*`` followed directly by ``***``) is
    therefore normalized to an immediate child.

    Args:
        lines: Document lines without line terminators
        marker: Heading marker character

    Returns:
        Root node (depth 0)
    """
    root = OrgNode()
    stack = [root]
    headings = 0

    for line in lines:
        title, level = classify_line(line, marker)

        if level == 0:
            stack[-1].content.append(line)
            continue

        # The root is never closed since level >= 1
        while stack[-1].depth >= level:
            stack.pop()

        parent = stack[-1]
        node = OrgNode(depth=parent.depth + 1, heading=title)
        parent.children.append(node)
        stack.append(node)
        headings += 1

    logger.debug("outline_parsed", lines=len(lines), headings=headings)
    return root


def _parse_keyword(line: str) -> Optional[tuple[str, str]]:
    """Split a ``#+KEY: value`` line into (key, value)."""
    if not line.startswith("#+") or ":" not in line:
        return None
    key, value = line[2:].split(":", 1)
    if not key or " " in key:
        return None
    return key, value.strip()
