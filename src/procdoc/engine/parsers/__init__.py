# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Content parsers for function and generic blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from procdoc.core.blocks import BlockRecord
from procdoc.core.types import BlockKind
from procdoc.engine.parsers.function import (
    RETURN_MEMBER,
    FunctionContentParser,
    parse_members_and_paragraphs,
    short_description,
)
from procdoc.engine.parsers.generic import GenericContentParser
from procdoc.exceptions import BlockContentError, NonFunctionBlockError


if TYPE_CHECKING:
    from procdoc.core.blocks import Block
    from procdoc.engine.run import Run


def parse_block(block: Block, run: Run) -> BlockRecord | None:
    """Route a block to its content parser.

    Returns:
        The block paired with its content, or None if the block was dropped.
    """
    match block.type:
        case BlockKind.FUNCTION:
            try:
                content = FunctionContentParser(run).parse(block)
            except NonFunctionBlockError as e:
                run.warn(e.message, file=block.file, line=e.details["line_number"])
                return None
            except BlockContentError as e:
                run.error(e.message, file=block.file, line=e.details["line_number"])
                return None
        case BlockKind.GENERIC:
            content = GenericContentParser().parse(block)
    return BlockRecord.from_block(block, content)


__all__ = (
    "RETURN_MEMBER",
    "FunctionContentParser",
    "GenericContentParser",
    "parse_block",
    "parse_members_and_paragraphs",
    "short_description",
)
