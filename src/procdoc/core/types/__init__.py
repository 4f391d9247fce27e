# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Base types for procdoc."""

from procdoc.core.types.delimiter import (
    NEVER_MATCH,
    BlockKind,
    DelimiterSet,
    FamilyDelimiters,
    FiletypeFamily,
)
from procdoc.core.types.enum import BaseEnum
from procdoc.core.types.models import (
    BASEDMODEL_CONFIG,
    FROZEN_BASEDMODEL_CONFIG,
    BasedModel,
    RootedRoot,
)


__all__ = (
    "BASEDMODEL_CONFIG",
    "FROZEN_BASEDMODEL_CONFIG",
    "NEVER_MATCH",
    "BaseEnum",
    "BasedModel",
    "BlockKind",
    "DelimiterSet",
    "FamilyDelimiters",
    "FiletypeFamily",
    "RootedRoot",
)
