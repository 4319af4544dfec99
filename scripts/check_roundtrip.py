#!/usr/bin/env python3
"""Check parser round-trip fidelity on a directory of org files.

This script scans a directory tree for .org files, parses each one and
renders it back, and reports every file whose rendering differs from the
original, with a unified diff. Diffs can be anonymized so that failing
cases can be shared as test fixtures.

Usage:
    python scripts/check_roundtrip.py ~/org
    python scripts/check_roundtrip.py ~/org --anonymize --output failures.txt
"""

import argparse
import difflib
import hashlib
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add src to path so we can import orgtree modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from orgtree import build_tree, classify_line, read_lines, render_lines


def anonymize_words(text: str) -> str:
    """Replace every word with a short hash, keeping punctuation and spacing."""
    result = []
    i = 0

    while i < len(text):
        if text[i].isalnum() or text[i] == "_":
            j = i
            while j < len(text) and (text[j].isalnum() or text[j] == "_"):
                j += 1
            word_hash = hashlib.md5(text[i:j].encode()).hexdigest()[:6]
            result.append(f"w{word_hash}")
            i = j
        else:
            result.append(text[i])
            i += 1

    return "".join(result)


def anonymize_line(line: str) -> str:
    """Anonymize a line, keeping heading markers and keyword names intact."""
    _title, level = classify_line(line)
    if level:
        return line[:level] + anonymize_words(line[level:])

    if line.startswith("#+") and ":" in line:
        key, value = line.split(":", 1)
        return f"{key}:{anonymize_words(value)}"

    return anonymize_words(line)


def check_file(path: Path) -> Tuple[bool, Optional[List[str]]]:
    """Parse and render one file.

    Returns:
        (passed, diff_lines) where diff_lines is None when the file passed
    """
    original = read_lines(path)
    rendered = render_lines(build_tree(original))

    if rendered == original:
        return True, None

    diff = list(
        difflib.unified_diff(
            original, rendered, fromfile=f"{path} (original)", tofile=f"{path} (rendered)", lineterm=""
        )
    )
    return False, diff


def check_directory(root: Path, anonymize: bool = False) -> Tuple[int, List[str]]:
    """Check every .org file under root.

    Returns:
        (number of files checked, report lines for failures)
    """
    report = []
    total = 0
    failed = 0

    for path in sorted(root.rglob("*.org")):
        total += 1
        try:
            passed, diff = check_file(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: Could not read {path}: {e}", file=sys.stderr)
            continue

        if passed:
            continue

        failed += 1
        if anonymize:
            diff = diff[:2] + [d[0] + anonymize_line(d[1:]) if d and d[0] in "+- " else d for d in diff[2:]]
        report.extend(diff)
        report.append("")

    print("\nRound-trip statistics:", file=sys.stderr)
    print(f"  Total files: {total}", file=sys.stderr)
    print(f"  Failed: {failed}", file=sys.stderr)

    return total, report


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Check parse/render round-trip on org files")
    parser.add_argument("directory", type=Path, help="Directory to scan for .org files")
    parser.add_argument("--output", "-o", type=Path, help="Output file (default: stdout)")
    parser.add_argument("--anonymize", action="store_true", help="Hash words in reported diffs")
    args = parser.parse_args()

    if not args.directory.is_dir():
        print(f"Error: Not a directory: {args.directory}", file=sys.stderr)
        return 2

    _total, report = check_directory(args.directory, anonymize=args.anonymize)

    text = "\n".join(report)
    if args.output:
        args.output.write_text(text)
    else:
        print(text)

    return 1 if report else 0


if __name__ == "__main__":
    sys.exit(main())
