"""Tests for rendering records and change events."""

import dataclasses
from datetime import datetime

import pytest

from foldermon.display import format_event, format_record
from foldermon.models import ChangeEvent, ChangeType, FileRecord, Kind, ProgramMetrics, TextMetrics

TS = 1_000_000_000 * 1_000_000_000


def make_record(kind, metrics=None, filename="a.txt", extension=".txt"):
    return FileRecord(
        path=f"test_folder/{filename}",
        filename=filename,
        extension=extension,
        creation_time=TS,
        last_modified_time=TS,
        kind=kind,
        metrics=metrics,
    )


class TestFormatEvent:

    @pytest.mark.parametrize(
        "change, expected",
        [
            (ChangeType.REMOVED, "a.txt was deleted."),
            (ChangeType.ADDED, "a.txt is a new file."),
            (ChangeType.MODIFIED, "a.txt has changed."),
        ],
    )
    def test_change_lines(self, change, expected):
        assert format_event(ChangeEvent(change, "test_folder/a.txt", "a.txt")) == expected

    def test_error_line_carries_detail(self):
        event = ChangeEvent(ChangeType.ERROR, "test_folder/a.txt", "a.txt", "Permission denied")
        assert format_event(event) == "a.txt could not be read: Permission denied"


class TestFormatRecord:

    def test_common_fields(self):
        lines = format_record(make_record(Kind.GENERIC, filename="data.bin", extension=".bin"))
        stamp = datetime.fromtimestamp(1_000_000_000).isoformat(timespec="seconds")

        assert lines == [
            "Filename: data.bin",
            "Extension: .bin",
            f"Creation Time: {stamp}",
            f"Last Updated: {stamp}",
            "Type: Generic File",
        ]

    def test_sub_second_part_is_truncated(self):
        record = dataclasses.replace(make_record(Kind.GENERIC), last_modified_time=TS + 999_999_999)
        stamp = datetime.fromtimestamp(1_000_000_000).isoformat(timespec="seconds")

        assert f"Last Updated: {stamp}" in format_record(record)

    def test_image_has_no_metrics(self):
        lines = format_record(make_record(Kind.IMAGE, filename="p.png", extension=".png"))
        assert lines[-1] == "Type: Image File"

    def test_text_metrics(self):
        lines = format_record(make_record(Kind.TEXT, TextMetrics(line_count=2, word_count=5, char_count=20)))
        assert lines[-4:] == ["Type: Text File", "Lines: 2", "Words: 5", "Characters: 20"]

    def test_program_metrics(self):
        record = make_record(
            Kind.PROGRAM,
            ProgramMetrics(line_count=3, class_count=1, method_count=1),
            filename="a.cpp",
            extension=".cpp",
        )
        lines = format_record(record)
        assert lines[-4:] == ["Type: Program File", "Lines: 3", "Classes: 1", "Methods: 1"]
