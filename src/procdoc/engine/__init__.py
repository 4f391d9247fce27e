# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The block-extraction engine: delimiters, scanner, content parsers and serializer."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from procdoc.core.utils import create_lazy_getattr


if TYPE_CHECKING:
    from procdoc.engine.delimiters import (
        DELIMITER_TABLE,
        DelimiterTable,
        get_delimiters,
    )
    from procdoc.engine.parsers import (
        FunctionContentParser,
        GenericContentParser,
        parse_block,
    )
    from procdoc.engine.run import Run
    from procdoc.engine.scanner import BlockScanner, ScanResult, ScanState, ScanStatus
    from procdoc.engine.serializer import serialize_record, write_records

_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "DELIMITER_TABLE": (__spec__.parent, "delimiters"),
    "BlockScanner": (__spec__.parent, "scanner"),
    "DelimiterTable": (__spec__.parent, "delimiters"),
    "FunctionContentParser": (__spec__.parent, "parsers"),
    "GenericContentParser": (__spec__.parent, "parsers"),
    "Run": (__spec__.parent, "run"),
    "ScanResult": (__spec__.parent, "scanner"),
    "ScanState": (__spec__.parent, "scanner"),
    "ScanStatus": (__spec__.parent, "scanner"),
    "get_delimiters": (__spec__.parent, "delimiters"),
    "parse_block": (__spec__.parent, "parsers"),
    "serialize_record": (__spec__.parent, "serializer"),
    "write_records": (__spec__.parent, "serializer"),
})


__getattr__ = create_lazy_getattr(_dynamic_imports, globals(), __name__)

__all__ = (
    "DELIMITER_TABLE",
    "BlockScanner",
    "DelimiterTable",
    "FunctionContentParser",
    "GenericContentParser",
    "Run",
    "ScanResult",
    "ScanState",
    "ScanStatus",
    "get_delimiters",
    "parse_block",
    "serialize_record",
    "write_records",
)


def __dir__() -> list[str]:
    """List available attributes for the engine package."""
    return list(__all__)
