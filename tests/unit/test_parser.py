"""Unit tests for the org outline parser."""

import copy
import sys
from textwrap import dedent

import pytest

from orgtree.org.parser import OrgNode, build_tree


class TestOrgNode:
    """Tests for OrgNode model."""

    def test_create_empty_root(self):
        """Test creating an empty root node."""
        root = OrgNode()

        assert root.depth == 0
        assert root.heading == ""
        assert root.content == []
        assert root.children == []

    def test_roots_do_not_share_lists(self):
        """Test that default content and children are per-instance."""
        first = OrgNode()
        second = OrgNode()
        first.content.append("line")
        first.add_child("A")

        assert second.content == []
        assert second.children == []

    def test_add_child_to_end(self):
        """Test adding child node to end."""
        root = OrgNode()
        child = root.add_child("Child")

        assert root.children == [child]
        assert child.depth == 1
        assert child.heading == "Child"

    def test_add_child_at_position(self):
        """Test adding child at specific position."""
        root = OrgNode()
        root.add_child("Child 1")
        root.add_child("Child 3")
        root.add_child("Child 2", position=1)

        assert [c.heading for c in root.children] == ["Child 1", "Child 2", "Child 3"]

    def test_nested_children(self):
        """Test creating nested structure."""
        root = OrgNode()
        grandchild = root.add_child("Child").add_child("Grandchild")

        assert grandchild.depth == 2
        assert root.children[0].children[0] is grandchild

    def test_set_heading(self):
        """Test that heading can be changed after parsing."""
        root = OrgNode.from_lines(["* Old"])
        root.children[0].heading = "New"

        assert root.to_lines() == ["* New"]

    def test_mutate_content_and_children(self):
        """Test that content and children lists can be mutated in place."""
        root = OrgNode.from_lines(["intro", "* A", "* B"])

        root.content.append("more intro")
        del root.children[0]

        assert root.to_lines() == ["intro", "more intro", "* B"]

    def test_structural_equality(self):
        """Test that trees compare by value."""
        lines = ["x", "* A", "y", "** B"]

        assert OrgNode.from_lines(lines) == OrgNode.from_lines(lines)
        assert OrgNode.from_lines(lines) != OrgNode.from_lines(lines[:-1])

    def test_deepcopy_is_independent(self):
        """Test that a deep copy shares nothing with the original."""
        root = OrgNode.from_lines(["* A", "body"])
        clone = copy.deepcopy(root)
        clone.children[0].content.append("extra")

        assert root.children[0].content == ["body"]

    def test_full_heading(self):
        """Test rendering the heading line of a node."""
        root = OrgNode.from_lines(["* A", "** B"])

        assert root.full_heading() == ""
        assert root.children[0].full_heading() == "* A"
        assert root.children[0].children[0].full_heading() == "** B"

    def test_str_is_display_text(self):
        """Test that str() renders lines joined by newlines."""
        root = OrgNode.from_lines(["intro", "* A"])

        assert str(root) == "intro\n* A"

    def test_walk_is_document_order(self):
        """Test that walk yields root first, then headings in order."""
        root = OrgNode.from_lines(["* A", "** A1", "*** A1a", "** A2", "* B"])

        headings = [node.heading for node in root.walk()]

        assert headings == ["", "A", "A1", "A1a", "A2", "B"]

    def test_find_heading(self):
        """Test case-insensitive heading search."""
        root = OrgNode.from_lines(["* Planning", "** Risks", "* Meeting Log"])

        assert root.find_heading("risks") is root.children[0].children[0]
        assert root.find_heading("LOG") is root.children[1]
        assert root.find_heading("missing") is None

    def test_find_heading_skips_root(self):
        """Test that the root's empty heading never matches."""
        assert OrgNode().find_heading("") is None


class TestKeywords:
    """Tests for #+KEY: value lines."""

    def test_get_keyword(self):
        """Test reading keywords from content."""
        root = OrgNode.from_lines(["#+TITLE: My Notes", "#+author:  Sam ", "* A"])

        assert root.get_keyword("TITLE") == "My Notes"
        assert root.get_keyword("title") == "My Notes"
        assert root.get_keyword("AUTHOR") == "Sam"
        assert root.get_keyword("DATE") is None

    def test_non_keyword_lines_ignored(self):
        """Test that similar-looking lines are not keywords."""
        root = OrgNode.from_lines(["# TITLE: comment", "#+BEGIN SRC: x", "TITLE: plain"])

        assert root.get_keyword("TITLE") is None
        assert root.get_keyword("BEGIN SRC") is None

    def test_set_keyword_updates_in_place(self):
        """Test that an existing keyword keeps its position and spelling."""
        root = OrgNode.from_lines(["#+title: Old", "body"])
        root.set_keyword("TITLE", "New")

        assert root.content == ["#+title: New", "body"]

    def test_set_keyword_appends(self):
        """Test that a new keyword is appended to content."""
        root = OrgNode.from_lines(["body"])
        root.set_keyword("author", "Sam")

        assert root.content == ["body", "#+AUTHOR: Sam"]
        assert root.get_keyword("author") == "Sam"


class TestBuildTree:
    """Tests for build_tree and the OrgNode parse constructors."""

    def test_parse_empty(self):
        """Test that no lines give an empty root."""
        root = build_tree([])

        assert root == OrgNode()

    def test_parse_empty_text(self):
        """Test that empty text gives an empty root."""
        assert OrgNode.parse("") == OrgNode()

    def test_reference_example(self, sample_lines):
        """Test content before, under and between headings."""
        root = build_tree(sample_lines)

        assert root.depth == 0
        assert root.content == ["Intro line"]
        assert [c.heading for c in root.children] == ["A", "B"]

        a, b = root.children
        assert a.depth == 1
        assert a.content == ["content under A"]
        assert len(a.children) == 1
        assert a.children[0] == OrgNode(depth=2, heading="A1")

        assert b == OrgNode(depth=1, heading="B")

    def test_content_only(self):
        """Test a document without headings."""
        root = build_tree(["one", "", "two"])

        assert root.content == ["one", "", "two"]
        assert root.children == []

    def test_content_attaches_to_preceding_heading(self):
        """Test that content after a nested heading stays with it."""
        root = build_tree(["* A", "** A1", "under A1", "* B", "under B"])

        a, b = root.children
        assert a.content == []
        assert a.children[0].content == ["under A1"]
        assert b.content == ["under B"]

    def test_content_between_children_goes_to_previous_sibling(self):
        """Test that content between siblings never moves to the parent."""
        root = build_tree(["* A", "** A1", "x", "** A2", "y"])

        a = root.children[0]
        assert a.content == []
        assert [c.content for c in a.children] == [["x"], ["y"]]

    def test_return_to_shallower_level(self):
        """Test closing several levels at once."""
        root = build_tree(["* A", "** B", "*** C", "* D"])

        assert [c.heading for c in root.children] == ["A", "D"]
        assert root.children[0].children[0].children[0].heading == "C"

    def test_empty_and_marker_only_headings(self):
        """Test headings without a title."""
        root = build_tree(["*", "** ", "***   "])

        node = root.children[0]
        assert node.heading == ""
        assert node.children[0].heading == ""
        assert node.children[0].children[0].heading == ""
        assert node.children[0].children[0].depth == 3

    def test_depth_skip_is_normalized(self):
        """Test that a skipped level becomes an immediate child."""
        root = build_tree(["* A", "*** Deep", "body"])

        deep = root.children[0].children[0]
        assert deep.heading == "Deep"
        assert deep.depth == 2
        assert deep.content == ["body"]

    def test_depth_skip_from_root(self):
        """Test a first heading with several markers."""
        root = build_tree(["*** Deep"])

        assert root.children[0].depth == 1

    def test_sibling_after_depth_skip(self):
        """Test that a heading at the skipped level closes the normalized node."""
        root = build_tree(["* A", "**** X", "*** Y", "** Z"])

        a = root.children[0]
        # X is normalized to depth 2; Y (level 3) is deeper, so it nests under X
        x = a.children[0]
        assert x.depth == 2
        assert x.children[0].heading == "Y"
        assert x.children[0].depth == 3
        # Z (level 2) closes X and becomes its sibling
        assert [c.heading for c in a.children] == ["X", "Z"]

    def test_parse_text(self):
        """Test parsing from a string."""
        text = dedent(
            """\
            Intro
            * A
            body"""
        )
        root = OrgNode.parse(text)

        assert root.content == ["Intro"]
        assert root.children[0].content == ["body"]

    def test_parse_custom_marker(self):
        """Test parsing with a different marker character."""
        root = OrgNode.from_lines(["# A", "* not a heading", "## B"], marker="#")

        a = root.children[0]
        assert a.content == ["* not a heading"]
        assert a.children[0].heading == "B"

    def test_input_is_not_modified(self):
        """Test that the source lines are left untouched."""
        lines = ["* A", "x"]
        build_tree(lines)

        assert lines == ["* A", "x"]

    def test_very_deep_nesting(self):
        """Test nesting deeper than the interpreter recursion limit."""
        depth = sys.getrecursionlimit() + 100
        lines = ["*" * level + f" H{level}" for level in range(1, depth + 1)]

        root = build_tree(lines)

        node = root
        for _ in range(depth):
            node = node.children[0]
        assert node.depth == depth
        assert node.heading == f"H{depth}"
