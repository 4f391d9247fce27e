# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Block records and their content.

A `Block` is what the scanner produces: metadata plus the captured lines, with
the lead prefix already removed. Content parsing turns a block into a
`BlockRecord`, whose content is either `FunctionContent` or `GenericContent`.
Records serialize to the JSON Lines schema:

    {"id", "type", "markup", "file", "lines": {"initial", "total"}, "content"}
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, NonNegativeInt, PositiveInt, model_validator

from procdoc.core.types import FROZEN_BASEDMODEL_CONFIG, BaseEnum, BasedModel, BlockKind, RootedRoot


# Markup of a block whose head carried no `!<tag>`.
NO_MARKUP = "none"
# Markup every finalized function block carries.
FUNCTION_MARKUP = "function"
# Heading of a paragraph that has none.
NO_HEADING = ""


class BlockSelection(str, BaseEnum):
    """Which block kinds a run emits."""

    ALL = "all"
    FUNCTION = "function"
    GENERIC = "generic"

    __slots__ = ()

    def admits(self, kind: BlockKind) -> bool:
        """Whether blocks of `kind` are emitted under this selection."""
        return self is BlockSelection.ALL or self.value == kind.value


class Severity(str, BaseEnum):
    """Severity of a diagnostic."""

    WARNING = "warning"
    ERROR = "error"

    __slots__ = ()


class Diagnostic(BasedModel):
    """A warning or error attributed to a file and line."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    severity: Severity
    message: str
    file: str
    line: NonNegativeInt

    def __str__(self) -> str:
        """Format as `<file>:<line>: <message>`."""
        return f"{self.file}:{self.line}: {self.message}"


class LineSpan(BasedModel):
    """Where a block's head sits and how many content lines it captured."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    initial: PositiveInt
    total: NonNegativeInt


class Block(BasedModel):
    """A finalized documentation block, as captured from a source file."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    id: NonNegativeInt
    type: BlockKind
    markup: str
    file: str
    lines: LineSpan
    captured: tuple[str, ...]

    @model_validator(mode="after")
    def _check_consistency(self) -> Block:
        if self.lines.total != len(self.captured):
            raise ValueError(
                f"lines.total ({self.lines.total}) does not match {len(self.captured)} captured lines"
            )
        if self.type is BlockKind.FUNCTION and self.markup != FUNCTION_MARKUP:
            raise ValueError(f"function blocks must have markup {FUNCTION_MARKUP!r}")
        return self


class Member(BasedModel):
    """A documented argument or special tag such as `@return`."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    name: str
    description: str


class Paragraph(BasedModel):
    """A paragraph of function documentation, with an optional heading."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    heading: str = NO_HEADING
    paragraph: str


class FunctionContent(BasedModel):
    """Structured content of a function block."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    name: Annotated[str, Field(min_length=1)]
    short_description: Annotated[str, Field(alias="short-description")] = ""
    members: tuple[Member, ...] = ()
    description: tuple[Paragraph, ...] = ()


class GenericContent(RootedRoot):
    """The captured lines of a generic block, lead stripped and otherwise verbatim."""

    root: tuple[str, ...]


class BlockRecord(BasedModel):
    """A block together with its parsed content, ready for serialization."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    id: NonNegativeInt
    type: BlockKind
    markup: str
    file: str
    lines: LineSpan
    content: FunctionContent | GenericContent

    @classmethod
    def from_block(cls, block: Block, content: FunctionContent | GenericContent) -> BlockRecord:
        """Pair a block's metadata with its parsed content."""
        return cls(
            id=block.id,
            type=block.type,
            markup=block.markup,
            file=block.file,
            lines=block.lines,
            content=content,
        )


__all__ = (
    "FUNCTION_MARKUP",
    "NO_HEADING",
    "NO_MARKUP",
    "Block",
    "BlockRecord",
    "BlockSelection",
    "Diagnostic",
    "FunctionContent",
    "GenericContent",
    "LineSpan",
    "Member",
    "Paragraph",
    "Severity",
)
