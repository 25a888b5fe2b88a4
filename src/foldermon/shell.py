import logging
from typing import TextIO

import typer

from .display import format_event
from .errors import NotFoundError, ScanError
from .models import ChangeEvent
from .monitor import DirectorySnapshotEngine

logger = logging.getLogger(__name__)

PROMPT: str = "Enter command (commit, status, info [filename], list, help, exit): "

HELP_TEXT: str = """Commands:
  commit           Take a new snapshot; later changes are measured from now.
  status           Show files deleted, added or changed since the last commit.
  info <filename>  Show metadata and analysis for one tracked file.
  list             Show all tracked files.
  help             Show this message.
  exit             Leave without saving."""


class Shell:
    """Interactive command loop around one snapshot engine."""

    def __init__(self, engine: DirectorySnapshotEngine) -> None:
        self.engine: DirectorySnapshotEngine = engine

    def run(self, stream: TextIO) -> None:
        """Read commands from `stream` until `exit` or end of input."""
        while True:
            typer.echo(PROMPT, nl=False)
            line: str = stream.readline()

            if not line:
                typer.echo()
                break

            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """
        Execute one command line. Returns False when the loop should stop.
        """
        parts: list[str] = line.strip().split(maxsplit=1)
        if not parts:
            return True

        command: str = parts[0]
        argument: str | None = parts[1].strip() if len(parts) > 1 else None
        logger.debug("Command %r, argument %r", command, argument)

        if command == "commit":
            self.engine.commit()
            typer.echo("Snapshot updated.")
        elif command == "status":
            self.status()
        elif command == "info":
            self.info(argument)
        elif command == "list":
            for record in self.engine.records():
                typer.echo(record.filename)
        elif command == "help":
            typer.echo(HELP_TEXT)
        elif command == "exit":
            return False
        else:
            typer.echo("Unknown command.")

        return True

    def status(self) -> None:
        try:
            events: list[ChangeEvent] = self.engine.status()
        except ScanError as e:
            typer.echo(f"Error: {e}")
            return

        if not events:
            typer.echo("No changes.")
            return

        for event in events:
            typer.echo(format_event(event))

    def info(self, filename: str | None) -> None:
        if not filename:
            typer.echo("Usage: info <filename>")
            return

        try:
            typer.echo(self.engine.info(filename))
        except NotFoundError as e:
            typer.echo(str(e))
