# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup exceptions."""

from __future__ import annotations


class MarkupError(Exception):
    """Base exception for genro-markup errors."""

    pass


class InvalidElementError(MarkupError, TypeError):
    """Raised when an element is given a name or text that is not a string."""

    pass
