"""Line-based file operations for org documents.

Files are read into lines without terminators and written back with a
single newline after every line. Writes are atomic (temp file + rename)
and can optionally refuse to clobber a file changed by another process.
"""

import os
from pathlib import Path
from typing import Optional, Sequence, Union

import structlog

from orgtree.services.exceptions import FileModifiedError
from orgtree.services.file_monitor import FileMonitor

logger = structlog.get_logger()


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on newline characters.

    A trailing newline does not produce an extra empty line, and a carriage
    return before a newline is dropped. Other Unicode line breaks are kept
    as part of the line.

    Examples:
        >>> split_lines("* A\\nbody\\n")
        ['* A', 'body']
        >>> split_lines("")
        []
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: Union[str, Path], encoding: str = "utf-8") -> list[str]:
    """
    Read a file and return its lines without terminators.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        Lines of the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        PermissionError: On permission errors
        OSError: On other file I/O errors
        UnicodeDecodeError: If the file is not valid in the given encoding
    """
    path = Path(path)
    # newline="" disables universal newline translation
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()

    lines = split_lines(text)
    logger.debug("lines_read", path=str(path), lines=len(lines))
    return lines


def write_lines(
    path: Union[str, Path],
    lines: Sequence[str],
    encoding: str = "utf-8",
    file_monitor: Optional[FileMonitor] = None,
) -> None:
    """
    Write lines to a file, each followed by a newline.

    Args:
        path: Target file path
        lines: Lines without terminators
        encoding: Text encoding of the file
        file_monitor: Optional FileMonitor for concurrent modification detection

    Raises:
        FileModifiedError: If the file was modified since it was recorded
        PermissionError: On permission errors
        OSError: On other file I/O errors
    """
    content = "".join(f"{line}\n" for line in lines)
    atomic_write(Path(path), content, encoding=encoding, file_monitor=file_monitor)


def atomic_write(
    path: Path,
    content: str,
    encoding: str = "utf-8",
    file_monitor: Optional[FileMonitor] = None,
) -> None:
    """
    Atomically write content to file with temp-file-rename pattern.

    1. Early modification check (before write)
    2. Write to temporary file in the target directory
    3. fsync to ensure data is on disk
    4. Late modification check (after write, before rename)
    5. Atomic rename to replace original file

    Modification checks only apply to files the monitor is tracking.

    Args:
        path: Target file path
        content: Content to write
        encoding: Text encoding
        file_monitor: Optional FileMonitor for concurrent modification detection

    Raises:
        FileModifiedError: If file was modified during write operation
        OSError: On file I/O errors
    """
    path = Path(path)
    monitored = file_monitor is not None and file_monitor.is_tracked(path)

    if monitored and file_monitor.is_modified(path):
        raise FileModifiedError(str(path), "File was modified before write (early check)")

    # Same directory keeps the rename on one filesystem
    temp_path = path.parent / f".{path.name}.tmp.{os.getpid()}"

    try:
        with open(temp_path, "w", encoding=encoding, newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        if monitored and file_monitor.is_modified(path):
            raise FileModifiedError(str(path), "File was modified during write (late check)")

        temp_path.replace(path)

        if file_monitor is not None:
            file_monitor.refresh(path)

        logger.debug("atomic_write_success", path=str(path), size=len(content))

    except Exception as e:
        if temp_path.exists():
            temp_path.unlink()
        logger.error("atomic_write_failed", path=str(path), error=str(e))
        raise
