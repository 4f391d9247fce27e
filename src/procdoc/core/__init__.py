# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Core types and records for procdoc."""

from types import MappingProxyType

from procdoc.core.utils.lazy_import import create_lazy_getattr


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "BASEDMODEL_CONFIG": (__spec__.parent, "types"),
    "FROZEN_BASEDMODEL_CONFIG": (__spec__.parent, "types"),
    "FUNCTION_MARKUP": (__spec__.parent, "blocks"),
    "NEVER_MATCH": (__spec__.parent, "types"),
    "NO_HEADING": (__spec__.parent, "blocks"),
    "NO_MARKUP": (__spec__.parent, "blocks"),
    "BaseEnum": (__spec__.parent, "types"),
    "BasedModel": (__spec__.parent, "types"),
    "Block": (__spec__.parent, "blocks"),
    "BlockKind": (__spec__.parent, "types"),
    "BlockRecord": (__spec__.parent, "blocks"),
    "BlockSelection": (__spec__.parent, "blocks"),
    "DelimiterSet": (__spec__.parent, "types"),
    "Diagnostic": (__spec__.parent, "blocks"),
    "FamilyDelimiters": (__spec__.parent, "types"),
    "FiletypeFamily": (__spec__.parent, "types"),
    "FunctionContent": (__spec__.parent, "blocks"),
    "GenericContent": (__spec__.parent, "blocks"),
    "LineSpan": (__spec__.parent, "blocks"),
    "Member": (__spec__.parent, "blocks"),
    "Paragraph": (__spec__.parent, "blocks"),
    "RootedRoot": (__spec__.parent, "types"),
    "Severity": (__spec__.parent, "blocks"),
    "create_lazy_getattr": (__spec__.parent, "utils"),
})


__getattr__ = create_lazy_getattr(_dynamic_imports, globals(), __name__)


__all__ = tuple(sorted(_dynamic_imports))


def __dir__() -> list[str]:
    """List available attributes for the core package."""
    return list(__all__)
