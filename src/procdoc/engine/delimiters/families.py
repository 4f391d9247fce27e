# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Filetype family classification and the delimiter table.

A filetype is a short label such as `sh` or `c`, usually the file's extension.
Each family groups filetypes sharing a comment convention and carries one
delimiter set per block kind. Families are tried in a fixed order and the last
entry, the default family, matches everything.

Example:
    >>> DELIMITER_TABLE.family_of("bash")
    <FiletypeFamily.SHELL: 'shell'>

    >>> DELIMITER_TABLE.resolve_filetype("notes.txt", default_filetype="")
    'unknown'
"""

from __future__ import annotations

import re

from collections.abc import Callable, Sequence
from pathlib import PurePath
from typing import NamedTuple

from procdoc.core.types.delimiter import BlockKind, DelimiterSet, FamilyDelimiters, FiletypeFamily


UNKNOWN_FILETYPE = "unknown"

# Trailing `!<tag>` on a head line names the block's markup.
MARKUP_TAG: re.Pattern[str] = re.compile(r"!([^!\s]+)\s*$")

# The keyword that may prefix a function block's header line.
DECLARATION_KEYWORD = "function"

# ================================================
# *          Delimiter patterns
# ================================================

HASH_HEAD = re.compile(r"^##(?:![^!\s]*)?\s*$")
HASH_LEAD = re.compile(r"^#(?: |$)")
HASH_FOOT = re.compile(r"^##\s*$")

C_HEAD = re.compile(r"^/\*\*(?:![^!\s]*)?\s*$")
C_LEAD = re.compile(r"^\*(?: |$)")
C_GENERIC_FOOT = re.compile(r"^\*\*/\s*$")
C_FUNCTION_FOOT = re.compile(r"^\*/\s*$")

# `function name(` in Awk and similar script languages.
SCRIPT_FUNCTION_FOOT = re.compile(r"^func(?:tion)?\s+[A-Za-z_][A-Za-z0-9_]*\s*\(")
# `name()` or `function name()` in the shell.
SHELL_FUNCTION_FOOT = re.compile(r"^(?:function\s+)?[A-Za-z_][A-Za-z0-9_.:+-]*\s*\(\s*\)")

HASH_GENERIC = DelimiterSet(head=HASH_HEAD, lead=HASH_LEAD, foot=HASH_FOOT)


class FamilyEntry(NamedTuple):
    """One row of the delimiter table."""

    matches: Callable[[str], bool]
    delimiters: FamilyDelimiters


def _filetype_predicate(*filetypes: str) -> Callable[[str], bool]:
    pattern = re.compile(rf"^(?:{'|'.join(re.escape(f) for f in filetypes)})$", re.IGNORECASE)
    return lambda filetype: pattern.match(filetype) is not None


DEFAULT_FAMILY = FamilyDelimiters(
    family=FiletypeFamily.DEFAULT,
    generic=HASH_GENERIC,
    function=DelimiterSet.unmatchable(),
)

FAMILY_TABLE: tuple[FamilyEntry, ...] = (
    FamilyEntry(
        _filetype_predicate("awk", "gawk", "mawk", "nawk"),
        FamilyDelimiters(
            family=FiletypeFamily.SCRIPT,
            generic=HASH_GENERIC,
            function=DelimiterSet(head=HASH_HEAD, lead=HASH_LEAD, foot=SCRIPT_FUNCTION_FOOT),
        ),
    ),
    FamilyEntry(
        _filetype_predicate("sh", "ash", "bash", "dash", "ksh", "mksh", "zsh", "bats"),
        FamilyDelimiters(
            family=FiletypeFamily.SHELL,
            generic=HASH_GENERIC,
            function=DelimiterSet(head=HASH_HEAD, lead=HASH_LEAD, foot=SHELL_FUNCTION_FOOT),
        ),
    ),
    FamilyEntry(
        _filetype_predicate(
            "c", "h", "cc", "cpp", "cxx", "c++", "hh", "hpp", "hxx", "h++",
            "m", "mm", "java", "js", "mjs", "cjs", "ts", "cs", "php", "css",
        ),
        FamilyDelimiters(
            family=FiletypeFamily.C_LIKE,
            generic=DelimiterSet(head=C_HEAD, lead=C_LEAD, foot=C_GENERIC_FOOT),
            function=DelimiterSet(head=C_HEAD, lead=C_LEAD, foot=C_FUNCTION_FOOT),
        ),
    ),
    FamilyEntry(lambda _filetype: True, DEFAULT_FAMILY),
)


class DelimiterTable:
    """An ordered table of (predicate, delimiters) pairs with an explicit default entry."""

    def __init__(self, entries: Sequence[FamilyEntry] = FAMILY_TABLE) -> None:
        """Initialize the table.

        Args:
            entries: Table rows in priority order. A catch-all default entry is
                appended when the last row is not one.
        """
        self._entries = tuple(entries)
        if not self._entries or self._entries[-1].delimiters is not DEFAULT_FAMILY:
            self._entries = (*self._entries, FamilyEntry(lambda _filetype: True, DEFAULT_FAMILY))

    def get(self, filetype: str) -> FamilyDelimiters:
        """Return the delimiter sets for `filetype`; the first matching row wins."""
        return next(entry.delimiters for entry in self._entries if entry.matches(filetype))

    def family_of(self, filetype: str) -> FiletypeFamily:
        """Return the family `filetype` belongs to."""
        return self.get(filetype).family

    def resolve_filetype(self, path: str | PurePath, default_filetype: str = "") -> str:
        """Determine the filetype of `path`.

        The file's final extension is used when it belongs to a known family. Otherwise
        `default_filetype` is used, and failing that the label `unknown`.
        """
        extension = PurePath(path).suffix.removeprefix(".")
        if extension and self.family_of(extension) is not FiletypeFamily.DEFAULT:
            return extension
        return default_filetype or UNKNOWN_FILETYPE


DELIMITER_TABLE = DelimiterTable()


def get_delimiters(filetype: str) -> FamilyDelimiters:
    """Get the generic and function delimiter sets for a filetype.

    Example:
        >>> get_delimiters("unknown").function.is_unmatchable
        True
    """
    return DELIMITER_TABLE.get(filetype)


def head_markup(line: str, kind: BlockKind) -> str | None:
    """Return the `!<tag>` markup on a generic head line, if any."""
    if kind is BlockKind.GENERIC and (match := MARKUP_TAG.search(line)):
        return match[1]
    return None


__all__ = (
    "DECLARATION_KEYWORD",
    "DEFAULT_FAMILY",
    "DELIMITER_TABLE",
    "FAMILY_TABLE",
    "MARKUP_TAG",
    "UNKNOWN_FILETYPE",
    "DelimiterTable",
    "FamilyEntry",
    "get_delimiters",
    "head_markup",
)
