# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Per-filetype comment delimiters."""

from procdoc.engine.delimiters.families import (
    DECLARATION_KEYWORD,
    DEFAULT_FAMILY,
    DELIMITER_TABLE,
    FAMILY_TABLE,
    MARKUP_TAG,
    UNKNOWN_FILETYPE,
    DelimiterTable,
    FamilyEntry,
    get_delimiters,
    head_markup,
)


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
