# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""CLI interface for procdoc."""

from types import MappingProxyType
from typing import TYPE_CHECKING

from procdoc.core.utils import create_lazy_getattr


if TYPE_CHECKING:
    from procdoc.cli.__main__ import app, extract, keep_last_selector, main


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "app": (__spec__.parent, "__main__"),
    "extract": (__spec__.parent, "__main__"),
    "keep_last_selector": (__spec__.parent, "__main__"),
    "main": (__spec__.parent, "__main__"),
})


__getattr__ = create_lazy_getattr(_dynamic_imports, globals(), __name__)


__all__ = ("app", "extract", "keep_last_selector", "main")


def __dir__() -> list[str]:
    return list(__all__)
