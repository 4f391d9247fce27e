# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Base enum class for the procdoc project."""

from __future__ import annotations

from enum import Enum
from typing import Self, cast, override

import textcase


class BaseEnum(Enum):
    """An enum class that provides common functionality for all string enums in procdoc.

    BaseEnum provides convenience methods for converting between strings and enum members
    and for presenting members to users.
    """

    @staticmethod
    def _deconstruct_string(value: str) -> list[str]:
        """Deconstruct a string into its component parts."""
        value = value.strip().lower().replace("-", "_").replace(" ", "_")
        return [v for v in value.split("_") if v]

    @classmethod
    @override
    def _missing_(cls, value: object) -> Self | None:
        """Handle missing values when converting from a string to an enum member."""
        if not isinstance(value, str):
            return None
        try:
            return cls.from_string(value)
        except ValueError:
            return None

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Convert a string to the corresponding enum member.

        Matches on value or name, ignoring case, then on the underscore/dash/space
        separated parts of the name.
        """
        lowered = str(value).lower()
        if literal_value := next(
            (
                member
                for member in cls
                if str(member.value).lower() == lowered or member.name.lower() == lowered
            ),
            None,
        ):
            return cast(Self, literal_value)
        value_parts = cls._deconstruct_string(value)
        if found_member := next(
            (member for member in cls if cls._deconstruct_string(member.name) == value_parts), None
        ):
            return found_member
        raise ValueError(f"{value} is not a valid {cls.__qualname__} member")

    @property
    def as_title(self) -> str:
        """Return the member's value formatted for display."""
        return textcase.title(str(self.value))

    @override
    def __str__(self) -> str:
        """Return the member's value."""
        return str(self.value)


__all__ = ("BaseEnum",)
