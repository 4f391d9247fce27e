# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""procdoc CLI entrypoint.

Scans the given files for documentation blocks and writes one JSON object per
block to standard output or to the `--output` file. Diagnostics go to
standard error.
"""

from __future__ import annotations

import contextlib
import logging
import sys

from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Annotated, TextIO

from cyclopts import App, Parameter
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from procdoc import __version__
from procdoc.common import PROCDOC_PREFIX, setup_logger
from procdoc.config import get_settings
from procdoc.core.blocks import BlockSelection
from procdoc.engine import Run
from procdoc.exceptions import ConfigurationError, ProcdocError


FUNCTION_FLAGS = frozenset({"-f", "--functions"})
GENERIC_FLAGS = frozenset({"-g", "--generics"})

console = Console()
error_console = Console(stderr=True, soft_wrap=True)
app = App(
    "procdoc",
    help="Extract documentation blocks from source files as JSON Lines.",
    default_parameter=Parameter(negative=()),
    version=f"procdoc version {__version__}",
    version_flags=["--version", "-v"],
    help_flags=["--help", "-h"],
    console=console,
)


def keep_last_selector(tokens: Sequence[str]) -> list[str]:
    """Drop all but the last of the `-f`/`-g` flags, so the last one given wins.

    Tokens after `--` are file paths and are left alone.
    """
    tokens = list(tokens)
    end = tokens.index("--") if "--" in tokens else len(tokens)
    selectors = [
        i for i, token in enumerate(tokens[:end]) if token in FUNCTION_FLAGS | GENERIC_FLAGS
    ]
    dropped = set(selectors[:-1])
    return [token for i, token in enumerate(tokens) if i not in dropped]


def fatal(message: str) -> None:
    """Print a fatal error to standard error and exit with status 1."""
    error_console.print(f"{PROCDOC_PREFIX} [bold red]fatal:[/bold red] {escape(message)}")
    sys.exit(1)


@contextlib.contextmanager
def open_output(output: str | None) -> Generator[TextIO]:
    """Open the output destination; `-` or None is standard output."""
    if output is None or output == "-":
        yield sys.stdout
        sys.stdout.flush()
        return
    try:
        stream = Path(output).open("w", encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"unable to create output file: {output}", details={"error": str(e)}
        ) from e
    with stream:
        yield stream


def _selection(*, functions: bool, generics: bool) -> BlockSelection | None:
    if functions and generics:
        raise ConfigurationError("--functions and --generics are mutually exclusive")
    if functions:
        return BlockSelection.FUNCTION
    if generics:
        return BlockSelection.GENERIC
    return None


@app.default
def extract(
    *paths: Annotated[Path, Parameter(help="Source files to scan, in order.")],
    functions: Annotated[
        bool, Parameter(name=["--functions", "-f"], help="Output only function blocks.")
    ] = False,
    generics: Annotated[
        bool, Parameter(name=["--generics", "-g"], help="Output only generic blocks.")
    ] = False,
    output: Annotated[
        str | None, Parameter(name=["--output", "-o"], help="Write output to this file.")
    ] = None,
    filetype: Annotated[
        str | None, Parameter(name=["--type", "-t"], help="Use this as the default filetype.")
    ] = None,
    quiet: Annotated[
        bool, Parameter(name=["--quiet", "-q"], help="Only report errors, not warnings.")
    ] = False,
) -> None:
    """Extract documentation blocks from source files.

    Blocks are written as JSON Lines in the order they are found. `-f` and `-g` are
    mutually exclusive; the last one given wins.
    """
    try:
        settings = get_settings().updated(
            default_filetype=filetype, blocks=_selection(functions=functions, generics=generics)
        )
    except (ConfigurationError, ValidationError) as e:
        fatal(str(e))
        return
    setup_logger(
        level=max(settings.log_level, logging.ERROR) if quiet else settings.log_level,
        rich=settings.rich_logging,
    )
    if not paths:
        fatal("no input files")
    for path in paths:
        if not path.is_file():
            fatal(f"file does not exist: {path}")
    run = Run(default_filetype=settings.default_filetype, selection=settings.blocks)
    try:
        with open_output(output) as stream:
            run.write(paths, stream)
    except ProcdocError as e:
        fatal(str(e))


def main(tokens: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    tokens = keep_last_selector(sys.argv[1:] if tokens is None else tokens)
    try:
        app(tokens)
    except KeyboardInterrupt:
        error_console.print(f"\n{PROCDOC_PREFIX} [yellow]interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()


__all__ = ("app", "console", "error_console", "extract", "keep_last_selector", "main")
