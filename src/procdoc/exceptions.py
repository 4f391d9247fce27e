# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unified exception hierarchy for procdoc.

All procdoc exceptions inherit from `ProcdocError`. Only `SourceReadError` is
fatal to a run; `BlockContentError` drops a single block and the run goes on.
"""

from __future__ import annotations

from typing import Any


class ProcdocError(Exception):
    """Base exception for all procdoc errors.

    Provides structured error information about where the error occurred.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize procdoc error.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return descriptive error message with context details."""
        parts = [self.message]
        if self.details:
            detail_parts = []
            if "file_path" in self.details:
                detail_parts.append(f"file: {self.details['file_path']}")
            for key in ["line_number", "block_id", "filetype"]:
                if key in self.details:
                    detail_parts.append(f"{key.replace('_', ' ')}: {self.details[key]}")
            if detail_parts:
                parts.append(f"({', '.join(detail_parts)})")
        return " ".join(parts)


class ConfigurationError(ProcdocError):
    """Configuration and settings errors.

    Raised when settings or command-line options cannot be turned into a valid run,
    such as an input path that does not exist.
    """


class ExtractionError(ProcdocError):
    """Block extraction errors."""


class SourceReadError(ExtractionError):
    """An input file could not be read. Aborts the whole run."""


class BlockContentError(ExtractionError):
    """A function block's content could not be parsed; the block is dropped."""


class MissingTitleError(BlockContentError):
    """A function block has no name on its header line."""


class NonFunctionBlockError(BlockContentError):
    """A function block's header declares something other than a function.

    Reported as a warning rather than an error, but the block is still dropped.
    """


__all__ = (
    "BlockContentError",
    "ConfigurationError",
    "ExtractionError",
    "MissingTitleError",
    "NonFunctionBlockError",
    "ProcdocError",
    "SourceReadError",
)
