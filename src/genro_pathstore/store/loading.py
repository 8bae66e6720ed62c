# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Functions for populating a PathStore from initial data.

Loading never notifies: the target store is being constructed and has
no subscribers yet.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import PathStore


def load_from_dict(store: PathStore, data: dict[str, Any]) -> None:
    """Insert every key/value pair of a dict, in dict order.

    Example:
        >>> load_from_dict(store, {'/etc/hosts': '127.0.0.1', '/tmp': None})
    """
    for path, value in data.items():
        store.insert(path, value, notify=False)


def load_from_list(store: PathStore, items: list) -> None:
    """Insert (path, value) tuples.

    Args:
        store: Target store.
        items: List of 2-tuples. A bare string is accepted as a path
            with value None.

    Raises:
        ValueError: If an item is neither a string nor a 2-tuple.
    """
    for item in items:
        if isinstance(item, str):
            store.insert(item, None, notify=False)
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            path, value = item
            store.insert(path, value, notify=False)
        else:
            raise ValueError(
                f"List items must be a path or a (path, value) pair, got {item!r}"
            )


def load_from_pathstore(store: PathStore, source: PathStore) -> None:
    """Copy all entries of another PathStore.

    Values are shared, the mapping is not.
    """
    for path, value in source.iter_items():
        store.insert(path, value, notify=False)
