# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Core utilities."""

from procdoc.core.utils.lazy_import import create_lazy_getattr


__all__ = ("create_lazy_getattr",)
