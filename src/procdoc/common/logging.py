# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Set up a logger with optional rich formatting.

Diagnostics always go to standard error, so the JSON Lines stream on standard
output stays clean.
"""

from __future__ import annotations

import logging
import sys

from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def get_rich_handler(**kwargs: Any) -> RichHandler:
    """Create a rich handler writing to standard error."""
    options = {"show_time": False, "show_path": False} | kwargs
    return RichHandler(
        console=Console(stderr=True, markup=False, soft_wrap=True, emoji=False),
        markup=False,
        **options,
    )


def setup_logger(
    name: str | None = "procdoc",
    *,
    level: int = logging.WARNING,
    rich: bool = True,
    rich_options: dict[str, Any] | None = None,
) -> logging.Logger:
    """Set up a logger with optional rich formatting."""
    if rich:
        handler: logging.Handler = get_rich_handler(**(rich_options or {}))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Clear existing handlers to prevent duplication
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


__all__ = ("get_rich_handler", "setup_logger")
