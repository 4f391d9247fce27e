# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""
procdoc settings.

Configuration sources (priority order):
1. Command-line options (highest priority)
2. Environment variables
3. Defaults

Environment Variables:
    PROCDOC_DEFAULT_FILETYPE: Filetype for files with no recognized extension (default: none)
    PROCDOC_BLOCKS: Block kinds to emit: all, function or generic (default: all)
    PROCDOC_LOG_LEVEL: Diagnostic log level (default: WARNING)
    PROCDOC_RICH_LOGGING: Format diagnostics with rich (default: true)
"""

from __future__ import annotations

import logging

from functools import cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from procdoc.core.blocks import BlockSelection


class ProcdocSettings(BaseSettings):
    """procdoc configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROCDOC_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_filetype: Annotated[
        str,
        Field(
            default="",
            description="Filetype used when a file's extension names no known filetype family.",
        ),
    ]

    blocks: Annotated[
        BlockSelection,
        Field(default=BlockSelection.ALL, description="Which block kinds to emit."),
    ]

    log_level: Annotated[
        int,
        Field(default=logging.WARNING, description="Level at which diagnostics are logged."),
    ]

    rich_logging: Annotated[
        bool,
        Field(default=True, description="Format diagnostics with rich."),
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip().isdigit():
            level = logging.getLevelName(value.strip().upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown log level: {value}")
            return level
        return value

    def updated(self, **overrides: Any) -> ProcdocSettings:
        """Return a copy with every override that is not None applied."""
        return self.model_copy(update={k: v for k, v in overrides.items() if v is not None})


@cache
def get_settings() -> ProcdocSettings:
    """Get cached settings instance."""
    return ProcdocSettings()


__all__ = ("ProcdocSettings", "get_settings")
