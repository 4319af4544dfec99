"""Shared test fixtures for all test modules."""

import shutil
from pathlib import Path

import pytest

FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture
def sample_lines():
    """Small document with content before, between and under headings."""
    return ["Intro line", "* A", "content under A", "** A1", "* B"]


@pytest.fixture
def sample_org_file(tmp_path):
    """
    Copy of tests/files/sample.org in a temporary directory.

    The sample has document keywords, blank lines, indented content and
    an untitled third-level heading, and it round-trips exactly.
    """
    target = tmp_path / "sample.org"
    shutil.copy(FILES_DIR / "sample.org", target)
    return target
