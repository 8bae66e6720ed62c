# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-PathStore - An in-memory, path-addressed virtual filesystem.

A lightweight, zero-dependency library that stores values under
slash-delimited paths and answers hierarchical queries by prefix.
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidPathError,
    InvalidSeparatorError,
    PathStoreError,
)
from .node import PathStoreChild
from .store import PathStore

__all__ = [
    # Core classes
    "PathStore",
    "PathStoreChild",
    # Exceptions
    "PathStoreError",
    "InvalidPathError",
    "InvalidSeparatorError",
]
