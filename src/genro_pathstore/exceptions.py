# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore exceptions."""

from __future__ import annotations


class PathStoreError(Exception):
    """Base exception for PathStore errors."""

    pass


class InvalidPathError(PathStoreError, TypeError):
    """Raised when a path argument is not a string."""

    pass


class InvalidSeparatorError(PathStoreError, ValueError):
    """Raised when the configured separator is not a non-empty string."""

    pass
