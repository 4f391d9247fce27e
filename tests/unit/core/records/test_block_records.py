# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Tests for block and record models, enums and exceptions."""

from __future__ import annotations

import pytest

from pydantic import ValidationError

from procdoc.core.blocks import (
    Block,
    BlockRecord,
    BlockSelection,
    Diagnostic,
    FunctionContent,
    GenericContent,
    LineSpan,
    Paragraph,
    Severity,
)
from procdoc.core.types import BlockKind, FiletypeFamily
from procdoc.exceptions import MissingTitleError, ProcdocError


pytestmark = [pytest.mark.unit]


def _block(**overrides) -> Block:
    fields = {
        "id": 0,
        "type": BlockKind.GENERIC,
        "markup": "none",
        "file": "a.sh",
        "lines": LineSpan(initial=1, total=1),
        "captured": ("text",),
    } | overrides
    return Block(**fields)


class TestBlock:
    """Block invariants."""

    def test_valid_block(self) -> None:
        block = _block()

        assert block.lines.total == len(block.captured)

    def test_total_must_match_captured(self) -> None:
        with pytest.raises(ValidationError, match="does not match"):
            _block(lines=LineSpan(initial=1, total=2))

    def test_function_block_requires_function_markup(self) -> None:
        with pytest.raises(ValidationError, match="function blocks must have markup"):
            _block(type=BlockKind.FUNCTION, markup="md")

    def test_blocks_are_frozen(self) -> None:
        block = _block()

        with pytest.raises(ValidationError):
            block.markup = "md"

    def test_line_numbers_start_at_one(self) -> None:
        with pytest.raises(ValidationError):
            LineSpan(initial=0, total=0)


class TestContent:
    """Content models."""

    def test_function_name_required(self) -> None:
        with pytest.raises(ValidationError):
            FunctionContent(name="")

    def test_short_description_alias(self) -> None:
        by_alias = FunctionContent.model_validate({"name": "f", "short-description": "Does f."})
        by_name = FunctionContent(name="f", short_description="Does f.")

        assert by_alias == by_name
        assert "short-description" in by_name.model_dump(by_alias=True)

    def test_generic_content_is_a_sequence(self) -> None:
        content = GenericContent(("a", "", "b"))

        assert len(content) == 3
        assert list(content) == ["a", "", "b"]
        assert content[1] == ""
        assert "b" in content

    def test_paragraph_default_heading(self) -> None:
        assert Paragraph(paragraph="text").heading == ""

    def test_record_from_block(self) -> None:
        block = _block(id=7, markup="md")

        record = BlockRecord.from_block(block, GenericContent(block.captured))

        assert (record.id, record.type, record.markup, record.file) == (
            7,
            BlockKind.GENERIC,
            "md",
            "a.sh",
        )
        assert record.lines == block.lines


class TestEnums:
    """Enum lookups."""

    @pytest.mark.parametrize(
        ("kind", "selection", "admitted"),
        [
            (BlockKind.FUNCTION, BlockSelection.ALL, True),
            (BlockKind.GENERIC, BlockSelection.ALL, True),
            (BlockKind.FUNCTION, BlockSelection.FUNCTION, True),
            (BlockKind.GENERIC, BlockSelection.FUNCTION, False),
            (BlockKind.GENERIC, BlockSelection.GENERIC, True),
            (BlockKind.FUNCTION, BlockSelection.GENERIC, False),
        ],
    )
    def test_selection_admits(self, kind: BlockKind, selection: BlockSelection, admitted: bool) -> None:
        assert selection.admits(kind) is admitted

    @pytest.mark.parametrize("value", ["function", "FUNCTION", "Function"])
    def test_from_string(self, value: str) -> None:
        assert BlockSelection.from_string(value) is BlockSelection.FUNCTION

    def test_lookup_by_value(self) -> None:
        assert BlockKind("generic") is BlockKind.GENERIC
        assert FiletypeFamily("c_like") is FiletypeFamily.C_LIKE

    def test_severities(self) -> None:
        """Fatal conditions are raised as exceptions, never recorded as diagnostics."""
        assert [s.value for s in Severity] == ["warning", "error"]

    def test_str_is_value(self) -> None:
        assert str(Severity.WARNING) == "warning"

    def test_as_title(self) -> None:
        assert FiletypeFamily.SHELL.as_title == "Shell"

    def test_unknown_value(self) -> None:
        with pytest.raises(ValueError, match="not a valid BlockSelection"):
            BlockSelection.from_string("methods")


class TestDiagnostics:
    """Diagnostic formatting and exception text."""

    def test_diagnostic_str(self) -> None:
        diagnostic = Diagnostic(severity=Severity.ERROR, message="bad", file="x.c", line=3)

        assert str(diagnostic) == "x.c:3: bad"

    def test_error_str_includes_location(self) -> None:
        error = MissingTitleError(
            "missing title in function block", details={"file_path": "lib.sh", "line_number": 4}
        )

        assert isinstance(error, ProcdocError)
        assert error.message == "missing title in function block"
        assert "lib.sh" in str(error)
        assert "4" in str(error)

    def test_error_without_details(self) -> None:
        assert str(ProcdocError("plain")) == "plain"
