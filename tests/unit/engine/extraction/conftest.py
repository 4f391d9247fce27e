# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Shared fixtures for extraction engine tests."""

from collections.abc import Sequence

import pytest

from procdoc.core.blocks import Block
from procdoc.core.types import BlockKind
from procdoc.engine import Run


@pytest.fixture
def make_function_block(run: Run):
    """Create a finalized function block from captured lines."""

    def _make(lines: Sequence[str], *, initial: int = 1, file: str = "lib.sh") -> Block:
        return run.add_block(
            type=BlockKind.FUNCTION, markup="function", file=file, initial=initial, captured=lines
        )

    return _make
