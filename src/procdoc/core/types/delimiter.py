# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Delimiter related types shared by the delimiter table and the scanner."""

from __future__ import annotations

import re

from typing import NamedTuple

from procdoc.core.types.enum import BaseEnum


# A pattern that can never match, for families without function blocks.
NEVER_MATCH: re.Pattern[str] = re.compile(r"(?!)")


class BlockKind(str, BaseEnum):
    """The kind of a documentation block."""

    GENERIC = "generic"
    FUNCTION = "function"

    __slots__ = ()


class FiletypeFamily(str, BaseEnum):
    """Classes of source languages sharing one comment-delimiter convention."""

    SCRIPT = "script"
    SHELL = "shell"
    C_LIKE = "c_like"
    DEFAULT = "default"

    __slots__ = ()


class DelimiterSet(NamedTuple):
    """Patterns delimiting one kind of block.

    All patterns are matched against a line with its leading spaces and tabs removed.
    """

    head: re.Pattern[str]
    """Opens a block."""
    lead: re.Pattern[str]
    """Per-line prefix, stripped from every captured line."""
    foot: re.Pattern[str]
    """Closes a block."""

    @classmethod
    def unmatchable(cls) -> DelimiterSet:
        """A delimiter set that never opens, continues or closes a block."""
        return cls(head=NEVER_MATCH, lead=NEVER_MATCH, foot=NEVER_MATCH)

    @property
    def is_unmatchable(self) -> bool:
        """Whether this set can never open a block."""
        return self.head is NEVER_MATCH

    def strip_lead(self, line: str) -> str | None:
        """Return `line` without its lead prefix, or None if the line has no lead."""
        if match := self.lead.match(line):
            return line[match.end() :]
        return None


class FamilyDelimiters(NamedTuple):
    """The generic and function delimiter sets of one filetype family."""

    family: FiletypeFamily
    generic: DelimiterSet
    function: DelimiterSet

    def for_kind(self, kind: BlockKind) -> DelimiterSet:
        """Return the delimiter set for a block kind."""
        return self.function if kind is BlockKind.FUNCTION else self.generic

    def kinds(self) -> tuple[tuple[BlockKind, DelimiterSet], ...]:
        """Return (kind, delimiters) pairs in match priority order, generic first."""
        return ((BlockKind.GENERIC, self.generic), (BlockKind.FUNCTION, self.function))


__all__ = ("NEVER_MATCH", "BlockKind", "DelimiterSet", "FamilyDelimiters", "FiletypeFamily")
