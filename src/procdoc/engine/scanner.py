# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Line-oriented block scanner.

The scanner walks a file one line at a time and segments it into documentation
blocks. It has two states:

- `SKIPPING`: outside any block; a line matching a head pattern opens a block.
- `CAPTURING`: inside a block; a foot line closes it, a lead line is captured
  with its lead removed, and any other line closes it early with an
  "unclosed block" warning.

Patterns are matched against the line with its leading spaces and tabs removed, and
generic patterns always take priority over function patterns. The kind of
a block is settled when it closes: the foot that matched decides it, unless the
head carried an explicit `!function` tag.
"""

from __future__ import annotations

import logging

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple, TextIO

from procdoc.core.blocks import FUNCTION_MARKUP, NO_MARKUP, Block
from procdoc.core.types import BaseEnum, BlockKind, FamilyDelimiters
from procdoc.engine.delimiters import DELIMITER_TABLE, DelimiterTable, head_markup
from procdoc.exceptions import SourceReadError


if TYPE_CHECKING:
    from procdoc.engine.run import Run


logger = logging.getLogger(__name__)


class ScanState(str, BaseEnum):
    """Scanner states."""

    SKIPPING = "skipping"
    CAPTURING = "capturing"

    __slots__ = ()


class ScanStatus(str, BaseEnum):
    """Outcome of one `BlockScanner.next_block` call."""

    BLOCK = "block"
    EOF = "eof"
    IO_ERROR = "io_error"

    __slots__ = ()


class ScanResult(NamedTuple):
    """The status of a scan step and, when a block was read, the block."""

    status: ScanStatus
    block: Block | None = None
    error: SourceReadError | None = None


class SourceLine(NamedTuple):
    """One physical line of a source file."""

    number: int
    text: str

    @property
    def stripped(self) -> str:
        """The line without leading spaces and tabs."""
        return self.text.lstrip(" \t")


@dataclass
class _OpenBlock:
    """A block that is still capturing lines."""

    kind: BlockKind
    markup: str
    initial: int
    captured: list[str] = field(default_factory=list)


def iter_source_lines(handle: TextIO) -> Iterator[SourceLine]:
    """Yield the lines of `handle`, numbered from 1, without line terminators."""
    for number, text in enumerate(handle, start=1):
        yield SourceLine(number, text.removesuffix("\n"))


class BlockScanner:
    """Scan one source file for documentation blocks.

    Each call to `next_block` consumes lines until a block is finalized, the end
    of the file is reached, or reading fails. Finalized blocks are registered with
    the `Run`, which assigns their ids.

    Example:
        >>> with BlockScanner("procdoc.sh", run) as scanner:
        ...     blocks = list(scanner)
    """

    def __init__(
        self,
        path: str | Path,
        run: Run,
        *,
        table: DelimiterTable = DELIMITER_TABLE,
        delimiters: FamilyDelimiters | None = None,
    ) -> None:
        """Initialize the scanner for a single file.

        Args:
            path: The file to scan.
            run: Run context that owns block ids and diagnostics.
            table: Delimiter table used to resolve the file's filetype.
            delimiters: Explicit delimiter sets, bypassing filetype resolution.
        """
        self.path = Path(path)
        self.file = str(path)
        self.run = run
        self.filetype = table.resolve_filetype(self.path, run.default_filetype)
        self.delimiters = delimiters or table.get(self.filetype)
        self.state = ScanState.SKIPPING
        self._handle: TextIO | None = None
        self._lines: Iterator[SourceLine] | None = None
        self._exhausted = False

    def __enter__(self) -> BlockScanner:
        """Return the scanner; the file is opened on the first read."""
        return self

    def __exit__(self, *_exc: object) -> None:
        """Close the file."""
        self.close()

    def close(self) -> None:
        """Close the underlying file, if open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __iter__(self) -> Iterator[Block]:
        """Yield blocks until the end of the file.

        Raises:
            SourceReadError: If the file cannot be read.
        """
        while True:
            result = self.next_block()
            match result.status:
                case ScanStatus.BLOCK if result.block is not None:
                    yield result.block
                case ScanStatus.IO_ERROR if result.error is not None:
                    raise result.error
                case _:
                    return

    def next_block(self) -> ScanResult:
        """Consume lines until the next block is finalized.

        Returns:
            `BLOCK` with the finalized block, `EOF` once the file is exhausted, or
            `IO_ERROR` with the error if the file could not be read.
        """
        open_block: _OpenBlock | None = None
        try:
            for line in self._source_lines():
                if open_block is None:
                    open_block = self._open(line)
                    continue
                kind = self._foot_kind(line)
                if kind is not None:
                    return ScanResult(ScanStatus.BLOCK, self._close(open_block, line, kind))
                captured = self.delimiters.for_kind(open_block.kind).strip_lead(line.stripped)
                if captured is None:
                    self.run.warn("unclosed block", file=self.file, line=line.number)
                    return ScanResult(ScanStatus.BLOCK, self._close(open_block, line, None))
                open_block.captured.append(captured)
        except OSError as e:
            self.close()
            self._exhausted = True
            self.state = ScanState.SKIPPING
            error = SourceReadError(
                f"unable to read file: {e.strerror or e}",
                details={"file_path": self.file, "error": str(e)},
            )
            return ScanResult(ScanStatus.IO_ERROR, error=error)
        if open_block is not None:
            # Input ran out mid-block; keep what was captured, without a warning.
            return ScanResult(ScanStatus.BLOCK, self._close(open_block, None, None))
        return ScanResult(ScanStatus.EOF)

    def _source_lines(self) -> Iterator[SourceLine]:
        if self._exhausted:
            return
        if self._lines is None:
            logger.debug(
                "Scanning %s as filetype %r (%s family)",
                self.file,
                self.filetype,
                self.delimiters.family.as_title,
            )
            self._handle = self.path.open(encoding="utf-8", errors="replace", newline="\n")
            self._lines = iter_source_lines(self._handle)
        # Closing this generator must leave `self._lines` usable by the next call.
        for line in self._lines:
            yield line
        self._exhausted = True
        self.close()

    def _open(self, line: SourceLine) -> _OpenBlock | None:
        """Open a block if `line` matches a head pattern."""
        for kind, delimiters in self.delimiters.kinds():
            if delimiters.head.match(line.stripped):
                self.state = ScanState.CAPTURING
                return _OpenBlock(
                    kind=kind,
                    markup=head_markup(line.stripped, kind) or NO_MARKUP,
                    initial=line.number,
                )
        return None

    def _foot_kind(self, line: SourceLine) -> BlockKind | None:
        """Return the kind whose foot pattern `line` matches, if any."""
        return next(
            (
                kind
                for kind, delimiters in self.delimiters.kinds()
                if delimiters.foot.match(line.stripped)
            ),
            None,
        )

    def _close(
        self, open_block: _OpenBlock, line: SourceLine | None, foot_kind: BlockKind | None
    ) -> Block:
        """Finalize `open_block` and register it with the run.

        Args:
            open_block: The block being captured.
            line: The line that ended the block, or None at the end of the file.
            foot_kind: The kind whose foot matched, or None if the block ended otherwise.
        """
        self.state = ScanState.SKIPPING
        kind, markup = open_block.kind, open_block.markup
        if foot_kind is not None:
            kind = BlockKind.FUNCTION if markup == FUNCTION_MARKUP else foot_kind
            if kind is BlockKind.FUNCTION and markup not in {FUNCTION_MARKUP, NO_MARKUP}:
                self.run.warn(
                    "function blocks may not have a markup tag",
                    file=self.file,
                    line=line.number if line is not None else open_block.initial,
                )
        if kind is BlockKind.FUNCTION:
            markup = FUNCTION_MARKUP
        return self.run.add_block(
            type=kind,
            markup=markup,
            file=self.file,
            initial=open_block.initial,
            captured=open_block.captured,
        )


__all__ = (
    "BlockScanner",
    "ScanResult",
    "ScanState",
    "ScanStatus",
    "SourceLine",
    "iter_source_lines",
)
