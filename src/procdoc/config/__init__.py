# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Configuration for procdoc."""

from procdoc.config.settings import ProcdocSettings, get_settings


__all__ = ("ProcdocSettings", "get_settings")
