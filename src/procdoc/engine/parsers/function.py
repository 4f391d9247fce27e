# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Structural parser for function blocks.

A function block documents one function:

    fatal - Write a formatted error message and exit.

    @fmt: A printf-like format string.
    @...: Parameters corresponding to the provided format string.

    @return: None. (Does not return.)

    NOTE: Output goes to standard error.

The first non-blank line is the header: the function name, optionally preceded
by the `function` keyword and followed by ` - short description`. Then come
members (`@name: description`) and paragraphs (optionally `Heading: text`),
each running until the next blank line. A member also ends at the next
`@name:` line; a paragraph does not.
"""

from __future__ import annotations

import re

from collections.abc import Iterator, Sequence
from itertools import groupby
from typing import TYPE_CHECKING

from procdoc.core.blocks import NO_HEADING, Block, FunctionContent, Member, Paragraph
from procdoc.engine.delimiters import DECLARATION_KEYWORD
from procdoc.exceptions import MissingTitleError, NonFunctionBlockError


if TYPE_CHECKING:
    from procdoc.engine.run import Run


RETURN_MEMBER = "@return"

# A leading word followed by an identifier, such as `function foo` or `struct bar`.
_DECLARATION = re.compile(r"^([A-Za-z]+)\s+[A-Za-z_]")
_NAME = re.compile(r"^[A-Za-z0-9:_+-]+")
_SHORT_DESCRIPTION = re.compile(r"(?<=\s)-\s+\S.*$")
_MEMBER = re.compile(r"^@([^\s:]+):(.*)$")
_HEADING = re.compile(r"^([\w ]+):(.*)$")


def _join(pieces: Sequence[str]) -> str:
    """Join text pieces with single spaces, skipping empty ones."""
    return " ".join(piece for piece in pieces if piece)


def _runs(lines: Sequence[str]) -> Iterator[list[str]]:
    """Yield runs of consecutive non-blank lines, each line stripped."""
    for is_text, run in groupby((line.strip() for line in lines), key=bool):
        if is_text:
            yield list(run)


def parse_members_and_paragraphs(
    lines: Sequence[str],
) -> tuple[tuple[Member, ...], tuple[Paragraph, ...]]:
    """Parse the lines following a function block's header.

    Args:
        lines: Captured lines after the header line.

    Returns:
        Members and paragraphs, each in the order they were encountered.
    """
    members: list[Member] = []
    paragraphs: list[Paragraph] = []
    for run in _runs(lines):
        index = 0
        while index < len(run):
            line = run[index]
            index += 1
            if member := _MEMBER.match(line):
                pieces = [member[2].strip()]
                while index < len(run) and not _MEMBER.match(run[index]):
                    pieces.append(run[index])
                    index += 1
                name = RETURN_MEMBER if member[1] == "return" else member[1]
                members.append(Member(name=name, description=_join(pieces)))
                continue
            heading, body = NO_HEADING, line
            if titled := _HEADING.match(line):
                heading, body = titled[1].strip(), titled[2].strip()
            paragraphs.append(Paragraph(heading=heading, paragraph=_join([body, *run[index:]])))
            index = len(run)
    return tuple(members), tuple(paragraphs)


def short_description(header: str) -> str:
    """Return the text after a whitespace-surrounded ` - ` on the header line."""
    if match := _SHORT_DESCRIPTION.search(header):
        return match.group().removeprefix("- ")
    return ""


class FunctionContentParser:
    """Turn a function block's captured lines into `FunctionContent`."""

    def __init__(self, run: Run) -> None:
        """Initialize the parser.

        Args:
            run: Run context that receives warnings.
        """
        self.run = run

    def parse(self, block: Block) -> FunctionContent:
        """Parse a finalized function block.

        Raises:
            NonFunctionBlockError: If the header declares something other than a function.
            MissingTitleError: If the header has no function name.
        """
        lines = block.captured
        header_index = next((i for i, line in enumerate(lines) if line.strip()), None)
        if header_index is None:
            self.run.warn("empty function block", file=block.file, line=block.lines.initial)
            raise MissingTitleError(
                "missing title in function block",
                details={"file_path": block.file, "line_number": block.lines.initial},
            )
        # Captured lines start on the line after the head marker.
        header_line = block.lines.initial + 1 + header_index
        original = lines[header_index].strip()
        header = original
        if declaration := _DECLARATION.match(header):
            if declaration[1] != DECLARATION_KEYWORD:
                raise NonFunctionBlockError(
                    "ignoring non-function block",
                    details={"file_path": block.file, "line_number": header_line},
                )
            header = header[len(DECLARATION_KEYWORD) :].lstrip()
        if not (name := _NAME.match(header)):
            raise MissingTitleError(
                "missing title in function block",
                details={"file_path": block.file, "line_number": header_line},
            )
        members, paragraphs = parse_members_and_paragraphs(lines[header_index + 1 :])
        return FunctionContent(
            name=name.group(),
            short_description=short_description(original),
            members=members,
            description=paragraphs,
        )


__all__ = (
    "RETURN_MEMBER",
    "FunctionContentParser",
    "parse_members_and_paragraphs",
    "short_description",
)
