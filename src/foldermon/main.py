import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer

from .config import CONFIG_FILENAME, DEFAULT_LOG_LEVEL, DEFAULT_ROOT, AppConfig
from .errors import DirectoryNotFoundError
from .log_config import setup_logging
from .monitor import DirectorySnapshotEngine
from .shell import Shell


def get_version() -> str:
    try:
        return version(distribution_name="foldermon")
    except PackageNotFoundError:
        return "unknown (package not installed)"


app: typer.Typer = typer.Typer(
    help=f"foldermon: track added, removed and changed files in a folder\n\nVersion: {get_version()}",
)


def print_version(is_version: bool) -> None:
    """
    Callback for the global --version / -V option.

    Typer passes False when the flag is absent, in which case normal command
    execution continues. When the flag is given the installed version is
    printed and the program exits before any subcommand runs.
    """
    if not is_version:
        return

    typer.echo(get_version())
    raise typer.Exit()


@app.command()
def init(
    root_path: Annotated[Path, typer.Argument()] = DEFAULT_ROOT,
    log_level: Annotated[str, typer.Option()] = DEFAULT_LOG_LEVEL,
    force: Annotated[bool, typer.Option()] = False,
) -> None:
    """
    Write a config file pointing at the folder to monitor.
    """
    if CONFIG_FILENAME.exists() and not force:
        typer.echo("Config file already exists. Use --force to overwrite.")
        raise typer.Exit(code=1)

    cfg: AppConfig = AppConfig(root_path=root_path, log_level=log_level.upper())
    cfg.save(CONFIG_FILENAME)
    typer.echo(f"Config written to {CONFIG_FILENAME}")


def load_run_config(root: Path | None) -> AppConfig:
    """Load the config file; an explicit root makes the file optional."""
    try:
        cfg: AppConfig = AppConfig.load()
    except FileNotFoundError:
        if root is None:
            raise
        cfg = AppConfig()

    if root is not None:
        cfg.root_path = root

    return cfg


@app.command()
def run(
    ctx: typer.Context,
    root: Annotated[Path | None, typer.Option(help="Folder to monitor, overrides the config file.")] = None,
) -> None:
    """Monitor a folder interactively: commit, status, info, exit."""
    try:
        cfg: AppConfig = load_run_config(root)
    except (FileNotFoundError, ValueError, TypeError) as e:
        typer.echo(e)
        raise typer.Exit(code=1)

    verbose: bool = bool(ctx.obj and ctx.obj.get("verbose"))
    if not verbose:
        try:
            setup_logging(cfg.log_level)
        except ValueError:
            typer.echo(f"Invalid log level: {cfg.log_level}")
            raise typer.Exit(code=1)

    try:
        engine: DirectorySnapshotEngine = DirectorySnapshotEngine(cfg.root_path)
    except DirectoryNotFoundError as e:
        typer.echo(e)
        raise typer.Exit(code=1)

    with engine:
        Shell(engine).run(sys.stdin)


@app.command(name="version")
def version_cmd() -> None:
    """Print the installed version of foldermon."""
    print_version(True)


@app.callback()
def main(
    ctx: typer.Context,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=print_version,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    """
    Global options for foldermon. All subcommands run after this callback
    unless --version is used.
    """
    ctx.obj = {"verbose": verbose}
    if verbose:
        setup_logging(logging.DEBUG)


if __name__ == "__main__":
    app()
