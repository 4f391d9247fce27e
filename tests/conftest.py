# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Global pytest configuration and fixtures for procdoc tests."""

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from procdoc.engine import Run


SourceWriter = Callable[[str, Sequence[str]], Path]


# ===========================================================================
# *                    Sample Sources
# ===========================================================================

# Line numbers matter to the tests; each entry is one physical line.
SHELL_SAMPLE: tuple[str, ...] = (
    "#! /usr/bin/env sh",  # 1
    "# Example shell library.",  # 2
    "",  # 3
    "##!md",  # 4
    "# # Sample library",  # 5
    "#",  # 6
    "# A *markdown* introduction.",  # 7
    "##",  # 8
    "",  # 9
    "##",  # 10
    "# greet - Print a greeting.",  # 11
    "#",  # 12
    "# @1: Name of the person to greet.",  # 13
    "# @2: Optional greeting, defaults to",  # 14
    '#     "hello".',  # 15
    "#",  # 16
    "# @return: 0 on success.",  # 17
    "#",  # 18
    "# NOTE: Writes to standard output.",  # 19
    "greet()",  # 20
    "{",  # 21
    '    printf "%s, %s\\n" "${2:-hello}" "${1}"',  # 22
    "}",  # 23
    "",  # 24
    "    ##",  # 25
    "    # Plain prose about the library.",  # 26
    "    ##",  # 27
)

C_SAMPLE: tuple[str, ...] = (
    "#include <stdio.h>",  # 1
    "",  # 2
    "/**!md",  # 3
    " * # Overview",  # 4
    " **/",  # 5
    "",  # 6
    "/**",  # 7
    " * add() - Add two integers.",  # 8
    " * @a: First operand.",  # 9
    " * @b: Second operand.",  # 10
    " *",  # 11
    " * @return: The sum.",  # 12
    " */",  # 13
    "int add(int a, int b) { return a + b; }",  # 14
)


@pytest.fixture
def write_source(tmp_path: Path) -> SourceWriter:
    """Write a source file from a sequence of lines and return its path."""

    def _write(name: str, lines: Sequence[str]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def shell_sample(write_source: SourceWriter) -> Path:
    """A shell library with a markdown block, a function block and a plain block."""
    return write_source("sample.sh", SHELL_SAMPLE)


@pytest.fixture
def c_sample(write_source: SourceWriter) -> Path:
    """A C file with a markdown block and a kernel-doc style function block."""
    return write_source("sample.c", C_SAMPLE)


@pytest.fixture
def run() -> Run:
    """A fresh run context."""
    return Run()
