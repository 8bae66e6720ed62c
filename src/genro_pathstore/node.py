# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore child record."""

from __future__ import annotations


class PathStoreChild:
    """An immediate child of a path, as returned by PathStore.get_children().

    Each record has:
    - full_path: The first stored key that produced this child
    - name: The path segment immediately below the queried path
    - parent: The segment preceding name in full_path ('' at the root)

    Example:
        >>> child = PathStoreChild('/foo/bar/x.txt', 'bar', 'foo')
        >>> child.name
        'bar'
    """

    __slots__ = ('full_path', 'name', 'parent')

    def __init__(self, full_path: str, name: str, parent: str = '') -> None:
        self.full_path = full_path
        self.name = name
        self.parent = parent

    def __repr__(self) -> str:
        return (
            f"PathStoreChild({self.name!r}, parent={self.parent!r}, "
            f"full_path={self.full_path!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathStoreChild):
            return NotImplemented
        return (self.full_path, self.name, self.parent) == (
            other.full_path, other.name, other.parent
        )

    def __hash__(self) -> int:
        return hash((self.full_path, self.name, self.parent))

    def as_dict(self) -> dict[str, str]:
        """Return the record as a plain dict."""
        return {'full_path': self.full_path, 'name': self.name, 'parent': self.parent}
