# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Render block records as JSON Lines.

Each record becomes one compact JSON object on its own line:

    {"id":0,"type":"generic","markup":"none","file":"a.sh","lines":{"initial":1,"total":1},"content":["text"]}

Only backslash, double quote, NUL, BEL, BS, HT, VT, FF and CR are escaped in
strings. Other control characters and non-ASCII text are written as they are.
Captured lines never contain a newline.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, TextIO


if TYPE_CHECKING:
    from procdoc.core.blocks import BlockRecord


_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\x00": "\\u0000",
    "\a": "\\u0007",
    "\b": "\\b",
    "\t": "\\t",
    "\v": "\\u000b",
    "\f": "\\f",
    "\r": "\\r",
})


def encode_string(value: str) -> str:
    """Quote and escape a string."""
    return f'"{value.translate(_ESCAPES)}"'


def encode_value(value: Any) -> str:
    """Encode a JSON-compatible value without insignificant whitespace."""
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case int() | float():
            return str(value)
        case str():
            return encode_string(value)
        case Mapping():
            return "{" + ",".join(
                f"{encode_string(str(key))}:{encode_value(item)}" for key, item in value.items()
            ) + "}"
        case Sequence():
            return "[" + ",".join(encode_value(item) for item in value) + "]"
        case _:
            raise TypeError(f"cannot encode {type(value).__qualname__} as JSON")


def serialize_record(record: BlockRecord) -> str:
    """Render one record as a single JSON line, without the trailing newline."""
    return encode_value(record.model_dump(mode="json", by_alias=True))


def write_records(records: Iterable[BlockRecord], stream: TextIO) -> int:
    """Write records to `stream`, one per line, in the order given.

    Returns:
        The number of records written.
    """
    count = 0
    for record in records:
        stream.write(serialize_record(record))
        stream.write("\n")
        count += 1
    return count


__all__ = ("encode_string", "encode_value", "serialize_record", "write_records")
