from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    GENERIC = "generic"
    TEXT = "text"
    IMAGE = "image"
    PROGRAM = "program"


class ChangeType(Enum):
    REMOVED = "removed"
    ADDED = "added"
    MODIFIED = "modified"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class TextMetrics:
    line_count: int
    word_count: int
    char_count: int


@dataclass(frozen=True, slots=True)
class ProgramMetrics:
    line_count: int
    class_count: int
    method_count: int


Metrics = TextMetrics | ProgramMetrics | None


@dataclass(frozen=True, slots=True)
class FileRecord:
    path: str
    filename: str
    extension: str
    # Both taken from the same stat call; creation time is not portable.
    creation_time: int
    last_modified_time: int
    kind: Kind
    metrics: Metrics = None


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    change: ChangeType
    path: str
    filename: str
    detail: str | None = None
