import logging
import os
import stat
import time
from collections.abc import Callable
from pathlib import Path
from types import TracebackType

from .analyzers import analyze, classify
from .display import format_record
from .errors import DirectoryNotFoundError, FileError, NotFoundError, ScanError
from .models import ChangeEvent, ChangeType, FileRecord, Kind, Metrics

logger = logging.getLogger(__name__)


def list_dir_entries(path: Path) -> list[str]:
    """
    Return the paths of all entries directly under `path`, sorted.

    Files, subdirectories and symlinks are all listed. Nothing below the
    first level is visited.

    Raises
    ------
    OSError
        If the directory cannot be listed.
    """
    with os.scandir(path) as it:
        return sorted(entry.path for entry in it)


def build_record(path: str) -> FileRecord:
    """
    Capture the metadata of one entry and run its content analyzer.

    Raises
    ------
    FileError
        If the entry cannot be stat'ed or its content cannot be read.
    """
    entry: Path = Path(path)

    try:
        st: os.stat_result = entry.stat()
        # Only regular files are opened for content analysis.
        kind: Kind = classify(entry.suffix) if stat.S_ISREG(st.st_mode) else Kind.GENERIC
        metrics: Metrics = analyze(kind, entry)
    except OSError as e:
        raise FileError(path, e.strerror or str(e)) from e

    return FileRecord(
        path=path,
        filename=entry.name,
        extension=entry.suffix,
        creation_time=st.st_mtime_ns,
        last_modified_time=st.st_mtime_ns,
        kind=kind,
        metrics=metrics,
    )


class DirectorySnapshotEngine:
    """
    Tracks the top-level entries of one directory between commits.

    The engine keeps a record per entry and a commit timestamp. `status()`
    reconciles the records with the live directory and reports what was
    removed, added or modified since the last commit. Records are never
    refreshed once built, so a modified file keeps being reported until the
    next `commit()`.
    """

    def __init__(self, root_path: Path | str, clock: Callable[[], int] = time.time_ns) -> None:
        self.root_path: Path = Path(root_path)
        self.clock: Callable[[], int] = clock

        if not self.root_path.is_dir():
            raise DirectoryNotFoundError(str(self.root_path))

        self.tracked: dict[str, FileRecord] = {}

        try:
            paths: list[str] = list_dir_entries(self.root_path)
        except OSError as e:
            raise DirectoryNotFoundError(str(self.root_path)) from e

        for path in paths:
            try:
                self.tracked[path] = build_record(path)
            except FileError as e:
                # Not tracked yet; the next status() retries and reports it.
                logger.warning("%s", e)

        self.last_commit_time: int = self.clock()
        logger.debug("Tracking %d entries under %s", len(self.tracked), self.root_path)

    def __enter__(self) -> "DirectorySnapshotEngine":
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self.tracked)

    def __contains__(self, path: object) -> bool:
        return path in self.tracked

    def close(self) -> None:
        self.tracked.clear()

    def commit(self) -> int:
        """Move the reference point for modification checks to now."""
        self.last_commit_time = self.clock()
        logger.info("Snapshot updated at %d", self.last_commit_time)
        return self.last_commit_time

    def status(self) -> list[ChangeEvent]:
        """
        Reconcile the tracked records with the live directory.

        Events are returned removals first, then additions, then
        modifications, each group ordered by path. An entry that cannot be
        read yields an ERROR event in the group of the phase that failed and
        does not stop the scan.

        Raises
        ------
        ScanError
            If the root directory cannot be listed. Tracked records are left
            untouched.
        """
        try:
            current: list[str] = list_dir_entries(self.root_path)
        except OSError as e:
            raise ScanError(str(self.root_path), e.strerror or str(e)) from e

        current_set: set[str] = set(current)
        removed: list[ChangeEvent] = []
        added: list[ChangeEvent] = []
        modified: list[ChangeEvent] = []

        for path in sorted(self.tracked):
            if path not in current_set:
                record: FileRecord = self.tracked.pop(path)
                removed.append(ChangeEvent(ChangeType.REMOVED, path, record.filename))

        for path in current:
            if path not in self.tracked:
                try:
                    self.tracked[path] = build_record(path)
                except FileError as e:
                    logger.warning("%s", e)
                    added.append(ChangeEvent(ChangeType.ERROR, path, Path(path).name, e.reason))
                    continue
                added.append(ChangeEvent(ChangeType.ADDED, path, self.tracked[path].filename))
            else:
                event: ChangeEvent | None = self._check_modified(self.tracked[path])
                if event is not None:
                    modified.append(event)

        logger.debug(
            "Scan of %s: %d removed, %d added, %d modified",
            self.root_path,
            len(removed),
            len(added),
            len(modified),
        )
        return removed + added + modified

    def _check_modified(self, record: FileRecord) -> ChangeEvent | None:
        try:
            mtime_ns: int = os.stat(record.path).st_mtime_ns
        except OSError as e:
            logger.warning("Could not stat %s: %s", record.path, e)
            return ChangeEvent(ChangeType.ERROR, record.path, record.filename, e.strerror or str(e))

        if mtime_ns > self.last_commit_time:
            return ChangeEvent(ChangeType.MODIFIED, record.path, record.filename)
        return None

    def records(self) -> list[FileRecord]:
        return [self.tracked[path] for path in sorted(self.tracked)]

    def lookup(self, filename: str) -> FileRecord:
        """
        Return the first record, in path order, whose base name is `filename`.

        Two paths can share a base name on case-insensitive filesystems; the
        first one in path order wins.
        """
        for record in self.records():
            if record.filename == filename:
                return record
        raise NotFoundError(filename)

    def info(self, filename: str) -> str:
        return "\n".join(format_record(self.lookup(filename)))
