# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Content of generic blocks: the captured lines, uninterpreted."""

from __future__ import annotations

from procdoc.core.blocks import Block, GenericContent


class GenericContentParser:
    """Wrap a generic block's captured lines as `GenericContent`."""

    def parse(self, block: Block) -> GenericContent:
        """Return the block's lines, lead already stripped, in order."""
        return GenericContent(block.captured)


__all__ = ("GenericContentParser",)
