# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Common utilities shared across procdoc."""

from procdoc.common.logging import get_rich_handler, setup_logger


PROCDOC_PREFIX = "[bold]procdoc[/bold]"


__all__ = ("PROCDOC_PREFIX", "get_rich_handler", "setup_logger")
