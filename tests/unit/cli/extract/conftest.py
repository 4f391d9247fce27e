# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Fixtures for CLI command tests."""

from __future__ import annotations

import logging

from collections.abc import Sequence

import pytest

from procdoc.cli.__main__ import main
from procdoc.config import get_settings


@pytest.fixture(autouse=True)
def plain_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Fresh settings per test, with plain logging so stderr is easy to assert on."""
    for name in ("DEFAULT_FILETYPE", "BLOCKS", "LOG_LEVEL"):
        monkeypatch.delenv(f"PROCDOC_{name}", raising=False)
    monkeypatch.setenv("PROCDOC_RICH_LOGGING", "false")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logging.getLogger("procdoc").handlers.clear()


@pytest.fixture
def run_cli():
    """Run the CLI with `tokens` and return its exit code."""

    def _run(tokens: Sequence[str]) -> int:
        try:
            main(list(tokens))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 0 if e.code is None else 1
        return 0

    return _run
