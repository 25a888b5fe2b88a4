from collections.abc import Callable, Iterable
from pathlib import Path

from .models import Kind, Metrics, ProgramMetrics, TextMetrics

EXTENSION_KINDS: dict[str, Kind] = {
    ".txt": Kind.TEXT,
    ".png": Kind.IMAGE,
    ".jpg": Kind.IMAGE,
    ".cpp": Kind.PROGRAM,
    ".java": Kind.PROGRAM,
}


def classify(extension: str) -> Kind:
    """Map a file extension to its kind. Matching is case-sensitive."""
    return EXTENSION_KINDS.get(extension, Kind.GENERIC)


def read_lines(path: Path) -> list[str]:
    """
    Read the lines of a file without their terminator.

    Lines are split on "\\n" only, so a trailing "\\r" is kept and counted.
    Undecodable bytes are replaced rather than raising.
    """
    with path.open("r", encoding="utf-8", errors="replace", newline="\n") as f:
        return [line.removesuffix("\n") for line in f]


def analyze_text(lines: Iterable[str]) -> TextMetrics:
    line_count: int = 0
    word_count: int = 0
    char_count: int = 0

    for line in lines:
        line_count += 1
        # Every space starts a new word, including doubled spaces.
        word_count += line.count(" ") + 1
        char_count += len(line)

    return TextMetrics(line_count=line_count, word_count=word_count, char_count=char_count)


def analyze_program(lines: Iterable[str]) -> ProgramMetrics:
    """
    Count lines, class-like lines and method-like lines.

    A line counts as a class when it contains "class " and as a method when
    it contains "void " or an opening parenthesis. This is a substring scan,
    not a parser.
    """
    line_count: int = 0
    class_count: int = 0
    method_count: int = 0

    for line in lines:
        line_count += 1
        if "class " in line:
            class_count += 1
        if "void " in line or "(" in line:
            method_count += 1

    return ProgramMetrics(line_count=line_count, class_count=class_count, method_count=method_count)


ANALYZERS: dict[Kind, Callable[[Iterable[str]], Metrics]] = {
    Kind.TEXT: analyze_text,
    Kind.PROGRAM: analyze_program,
}


def analyze(kind: Kind, path: Path) -> Metrics:
    """Run the content analyzer for `kind` on `path`, if that kind has one."""
    analyzer: Callable[[Iterable[str]], Metrics] | None = ANALYZERS.get(kind)
    if analyzer is None:
        return None
    return analyzer(read_lines(path))
