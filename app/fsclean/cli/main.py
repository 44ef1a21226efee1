"""Main CLI application entry point.

Defines the Typer application that validates the cleanup options,
sets up logging, and runs the tree cleaner.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fsclean import __version__
from fsclean.cleaner.models import CleanupConfig
from fsclean.cleaner.patterns import PatternError, compile_patterns
from fsclean.cleaner.tree import TreeCleaner
from fsclean.cli.args import normalize_args
from fsclean.core.config import ConfigError, load_settings
from fsclean.core.duration import is_valid_duration, parse_duration
from fsclean.core.logs import LogSetupError, configure_logging, release_logging
from fsclean.utils.formatting import print_error

BANNER = (
    "fsclean - Cleans up files on the filesystem.\n"
    "Copyright (C) 2009 Brodrick E. Bassham, Jr.\n"
)

USAGE = (
    "Usage: fsclean -p:<path> -a:<maxAgeToKeep> [--delete-empty] "
    "[-l:<logPath>] [-i:<ignoreRegex>] [--quiet|-q]"
)

app = typer.Typer(
    name="fsclean",
    help="Delete files older than a maximum age below a directory.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fsclean version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Annotated[
        str | None,
        typer.Option("--path", "-p", help="Root directory to clean."),
    ] = None,
    max_age: Annotated[
        str | None,
        typer.Option(
            "--max-age",
            "-a",
            help="Maximum age to keep: 7d, 12h, 30m, 1.5days or [d.]hh:mm:ss.",
        ),
    ] = None,
    delete_empty: Annotated[
        bool,
        typer.Option("--delete-empty", help="Remove directories left empty."),
    ] = False,
    ignore: Annotated[
        list[str] | None,
        typer.Option(
            "--ignore",
            "-i",
            help="Regular expression for paths to keep. Repeatable.",
        ),
    ] = None,
    log_dir: Annotated[
        Path | None,
        typer.Option("--log", "-l", help="Directory for a dated log file."),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress the startup banner."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo deletions to stderr."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file with default options."),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Delete aged files, and optionally emptied directories, below a path.

    Per-entry failures are logged and never stop the cleanup.
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not (quiet or settings.quiet):
        typer.echo(BANNER)

    root = path if path is not None else settings.path
    age_text = max_age if max_age is not None else settings.max_age
    max_age_value = parse_duration(age_text) if age_text else None

    if not root or max_age_value is None or not is_valid_duration(max_age_value):
        typer.echo(USAGE)
        raise typer.Exit()

    try:
        patterns = compile_patterns([*settings.ignore, *(ignore or [])])
    except PatternError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        config = CleanupConfig(
            root=Path(root),
            max_age=max_age_value,
            delete_empty=delete_empty or settings.delete_empty,
            ignore=patterns,
            quiet=quiet or settings.quiet,
        )
    except ValidationError as e:
        print_error(_first_error(e))
        raise typer.Exit(code=1) from e

    _run_cleanup(config, log_dir if log_dir is not None else settings.log_dir, verbose)


def run() -> None:
    """Console script entry point accepting the ``-x:value`` syntax."""
    app(args=normalize_args(sys.argv[1:]), prog_name="fsclean")


# === Private helper functions ===


def _run_cleanup(config: CleanupConfig, log_dir: Path | None, verbose: bool) -> None:
    """Run the tree cleaner with logging attached for its duration."""
    try:
        handlers = configure_logging(log_dir, verbose=verbose)
    except LogSetupError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        TreeCleaner(config).run()
    finally:
        release_logging(handlers)


def _first_error(error: ValidationError) -> str:
    """Extract a readable message from a configuration validation error."""
    details = error.errors()
    if not details:
        return str(error)
    message = str(details[0]["msg"])
    return message.removeprefix("Value error, ")


if __name__ == "__main__":
    run()
