from collections.abc import Callable
from datetime import datetime
from typing import Any

from .models import ChangeEvent, ChangeType, FileRecord, Kind, ProgramMetrics, TextMetrics

KIND_LABELS: dict[Kind, str] = {
    Kind.GENERIC: "Generic File",
    Kind.TEXT: "Text File",
    Kind.IMAGE: "Image File",
    Kind.PROGRAM: "Program File",
}


def _format_ns(ts: int) -> str:
    return datetime.fromtimestamp(ts // 1_000_000_000).isoformat(timespec="seconds")


def _text_lines(metrics: TextMetrics) -> list[str]:
    return [
        f"Lines: {metrics.line_count}",
        f"Words: {metrics.word_count}",
        f"Characters: {metrics.char_count}",
    ]


def _program_lines(metrics: ProgramMetrics) -> list[str]:
    return [
        f"Lines: {metrics.line_count}",
        f"Classes: {metrics.class_count}",
        f"Methods: {metrics.method_count}",
    ]


METRIC_FORMATTERS: dict[Kind, Callable[[Any], list[str]]] = {
    Kind.TEXT: _text_lines,
    Kind.PROGRAM: _program_lines,
}


def format_record(record: FileRecord) -> list[str]:
    """Render a record as the lines shown by `info`."""
    lines: list[str] = [
        f"Filename: {record.filename}",
        f"Extension: {record.extension}",
        f"Creation Time: {_format_ns(record.creation_time)}",
        f"Last Updated: {_format_ns(record.last_modified_time)}",
        f"Type: {KIND_LABELS[record.kind]}",
    ]

    formatter: Callable[[Any], list[str]] | None = METRIC_FORMATTERS.get(record.kind)
    if formatter is not None and record.metrics is not None:
        lines.extend(formatter(record.metrics))

    return lines


def format_event(event: ChangeEvent) -> str:
    if event.change is ChangeType.REMOVED:
        return f"{event.filename} was deleted."
    elif event.change is ChangeType.ADDED:
        return f"{event.filename} is a new file."
    elif event.change is ChangeType.MODIFIED:
        return f"{event.filename} has changed."
    else:
        return f"{event.filename} could not be read: {event.detail}"
