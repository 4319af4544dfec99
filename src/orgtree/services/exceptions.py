"""Custom exceptions for orgtree file services."""


class FileModifiedError(OSError):
    """Raised when a file is modified by someone else while we write it.

    The file changed between the time it was recorded by a FileMonitor
    and the final write, so writing would silently discard those changes.

    Attributes:
        path: Path to the file that was modified
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str = "File was modified during write operation"):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")
