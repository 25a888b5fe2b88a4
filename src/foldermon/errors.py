"""Typed exceptions raised by the snapshot engine."""


class FolderMonitorError(RuntimeError):
    """Base class for all foldermon errors."""
    pass


class DirectoryNotFoundError(FolderMonitorError):
    """The monitored root does not exist or is not a directory."""

    def __init__(self, root_path: str):
        self.root_path = root_path
        super().__init__(f"{root_path} does not exist or is not a directory.")


class ScanError(FolderMonitorError):
    """The monitored root could not be listed during a scan."""

    def __init__(self, root_path: str, reason: str):
        self.root_path = root_path
        self.reason = reason
        super().__init__(f"Could not scan {root_path}: {reason}")


class FileError(FolderMonitorError):
    """A single entry's metadata or content could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class NotFoundError(FolderMonitorError):
    """No tracked file carries the requested name."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"File not found: {filename}")
