"""File modification monitoring for concurrent edit detection."""

from pathlib import Path
from typing import Dict


class FileMonitor:
    """
    Track file modification times to detect external changes.

    Record a file when it is read; before writing it back, ask whether it
    changed on disk in the meantime.

    Example:
        >>> monitor = FileMonitor()
        >>> path = Path("notes/todo.org")
        >>> outline = OrgNode.from_file(path)
        >>> monitor.record(path)
        >>> # Later, before write:
        >>> outline.to_file(path, file_monitor=monitor)  # raises FileModifiedError if changed
    """

    def __init__(self) -> None:
        self._mtimes: Dict[Path, float] = {}

    def record(self, path: Path) -> None:
        """
        Record current modification time for a file.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)
        self._mtimes[path] = path.stat().st_mtime

    def is_tracked(self, path: Path) -> bool:
        """Return True if the file has been recorded."""
        return Path(path) in self._mtimes

    def is_modified(self, path: Path) -> bool:
        """
        Check if file has been modified since last record.

        A tracked file that has since been deleted counts as modified.

        Returns:
            True if file modified or not yet tracked, False otherwise
        """
        path = Path(path)
        if path not in self._mtimes:
            return True
        try:
            current_mtime = path.stat().st_mtime
        except FileNotFoundError:
            return True
        return current_mtime != self._mtimes[path]

    def refresh(self, path: Path) -> None:
        """
        Update recorded modification time after a reload or write.

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        self.record(path)

    def forget(self, path: Path) -> None:
        """Stop tracking a file."""
        self._mtimes.pop(Path(path), None)
