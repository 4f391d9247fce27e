# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Base model implementations for procdoc."""

from __future__ import annotations

from collections.abc import Generator, Sequence
from typing import Any, override

from pydantic import BaseModel, ConfigDict, RootModel


# ================================================
# *      Pydantic Base Implementations
# ================================================

# Documentation text is carried verbatim, so strings are never stripped here.
BASEDMODEL_CONFIG = ConfigDict(
    serialize_by_alias=True,
    str_strip_whitespace=False,
    use_attribute_docstrings=True,
    validate_by_alias=True,
    validate_by_name=True,
    cache_strings="all",
)
FROZEN_BASEDMODEL_CONFIG = BASEDMODEL_CONFIG | ConfigDict(frozen=True)


class RootedRoot(RootModel[Sequence[Any]]):
    """A pre-customized pydantic RootModel with common configuration for procdoc."""

    model_config = FROZEN_BASEDMODEL_CONFIG

    root: Sequence[Any]

    @override
    def __iter__(self) -> Generator[Any]:  # type: ignore[override]
        """Iterate over the root items."""
        yield from self.root

    def __getitem__(self, index: int) -> Any:
        """Get an item by index."""
        return self.root[index]

    def __len__(self) -> int:
        """Get the length of the root."""
        return len(self.root)

    def __contains__(self, item: Any) -> bool:
        """Check if an item is in the root."""
        return item in self.root


class BasedModel(BaseModel):
    """A baser `BaseModel` for all models in the procdoc project."""

    model_config = BASEDMODEL_CONFIG


__all__ = ("BASEDMODEL_CONFIG", "FROZEN_BASEDMODEL_CONFIG", "BasedModel", "RootedRoot")
