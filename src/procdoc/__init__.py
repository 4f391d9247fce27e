# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""procdoc: extract structured documentation from marked comment blocks."""

from procdoc._version import __version__
from procdoc.exceptions import (
    BlockContentError,
    ConfigurationError,
    ExtractionError,
    MissingTitleError,
    NonFunctionBlockError,
    ProcdocError,
    SourceReadError,
)


__all__ = (
    "BlockContentError",
    "ConfigurationError",
    "ExtractionError",
    "MissingTitleError",
    "NonFunctionBlockError",
    "ProcdocError",
    "SourceReadError",
    "__version__",
)
