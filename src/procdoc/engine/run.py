# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The run context: one extraction over an ordered list of files.

A `Run` owns everything that is shared across files: the ordered collection
of blocks (whose positions are their ids), the diagnostics reported so far,
and the options that apply to every file. Files are processed strictly one
after another; each block is parsed and serialized as soon as it is found.
"""

from __future__ import annotations

import logging

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import TextIO

from procdoc.core.blocks import Block, BlockRecord, BlockSelection, Diagnostic, LineSpan, Severity
from procdoc.core.types import BlockKind
from procdoc.engine.delimiters import DELIMITER_TABLE, DelimiterTable
from procdoc.engine.parsers import parse_block
from procdoc.engine.scanner import BlockScanner
from procdoc.engine.serializer import write_records


logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class Run:
    """Context for one extraction run.

    Attributes:
        blocks: Every block found so far; `blocks[i].id == i`.
        diagnostics: Warnings and errors reported so far, in order.
        default_filetype: Filetype for files whose extension names no known family.
        selection: Which block kinds are emitted.
    """

    def __init__(
        self,
        *,
        default_filetype: str = "",
        selection: BlockSelection = BlockSelection.ALL,
        table: DelimiterTable = DELIMITER_TABLE,
    ) -> None:
        """Initialize an empty run."""
        self.default_filetype = default_filetype
        self.selection = selection
        self.table = table
        self.blocks: list[Block] = []
        self.diagnostics: list[Diagnostic] = []

    @property
    def next_id(self) -> int:
        """The id the next finalized block receives."""
        return len(self.blocks)

    def add_block(
        self, *, type: BlockKind, markup: str, file: str, initial: int, captured: Sequence[str]
    ) -> Block:
        """Register a finalized block, assigning it the next id."""
        block = Block(
            id=self.next_id,
            type=type,
            markup=markup,
            file=file,
            lines=LineSpan(initial=initial, total=len(captured)),
            captured=tuple(captured),
        )
        self.blocks.append(block)
        return block

    def report(self, severity: Severity, message: str, *, file: str, line: int) -> Diagnostic:
        """Record a diagnostic and log it."""
        diagnostic = Diagnostic(severity=severity, message=message, file=file, line=line)
        self.diagnostics.append(diagnostic)
        logger.log(_LOG_LEVELS[severity], "%s", diagnostic)
        return diagnostic

    def warn(self, message: str, *, file: str, line: int) -> Diagnostic:
        """Report a warning."""
        return self.report(Severity.WARNING, message, file=file, line=line)

    def error(self, message: str, *, file: str, line: int) -> Diagnostic:
        """Report an error that drops a block."""
        return self.report(Severity.ERROR, message, file=file, line=line)

    def scan(self, path: str | Path) -> Iterator[Block]:
        """Yield the blocks of one file in discovery order.

        Raises:
            SourceReadError: If the file cannot be read.
        """
        with BlockScanner(path, self, table=self.table) as scanner:
            yield from scanner

    def extract(self, paths: Iterable[str | Path]) -> Iterator[BlockRecord]:
        """Yield the selected records of every file, in id order.

        Blocks outside the selection, and function blocks whose content cannot be
        parsed, are skipped but keep their ids.

        Raises:
            SourceReadError: If any file cannot be read. Nothing after it is scanned.
        """
        for path in paths:
            for block in self.scan(path):
                if not self.selection.admits(block.type):
                    continue
                if (record := parse_block(block, self)) is not None:
                    yield record

    def write(self, paths: Iterable[str | Path], stream: TextIO) -> int:
        """Extract from `paths` and stream the records to `stream` as JSON Lines.

        Returns:
            The number of records written.
        """
        return write_records(self.extract(paths), stream)


__all__ = ("Run",)
