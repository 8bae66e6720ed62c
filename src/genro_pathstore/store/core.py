# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore - An in-memory, path-addressed key-value container.

This module provides the PathStore class, a flat mapping from path strings
to values that behaves like a small virtual filesystem. Hierarchy is never
stored: a "directory" exists only because it is a prefix of stored paths.

Key Features:
    - **Flat storage**: One dict, keys in insertion order
    - **Prefix hierarchy**: Subtree removal, relocation and child listing
      based on string prefixes
    - **Transformations**: map() and filter() build new, independent stores
    - **Reactive subscriptions**: Replay-latest notifications on changes

Prefix Matching:
    By default a key is a descendant of a path when it starts with the
    path string. '/foobar' is thus a descendant of '/foo'. Pass
    ``segment_match=True`` to require a separator after the path.

Example:
    Basic usage::

        store = PathStore()
        store.insert('/foo/bar/first', 0).insert('/foo/bar/second', 1)
        store.insert('/foo/baz/third', 2)

        store.move('/foo/bar', '/baz')
        store.get_paths()  # ['/foo/baz/third', '/baz/first', '/baz/second']
        store.get_child_names('/')  # ['foo', 'baz']
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterator, TypeVar

from ..exceptions import InvalidPathError, InvalidSeparatorError
from ..node import PathStoreChild
from .loading import load_from_dict, load_from_list, load_from_pathstore
from .subscription import SubscriberCallback, SubscriptionMixin

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class PathStore(SubscriptionMixin, Generic[T]):
    """A path-addressed value container with prefix-based hierarchy.

    PathStore provides:
    - insert / remove / move / clear: Mutations, each publishing one
      notification unless called with notify=False
    - read / get_paths / get_contents: Direct access
    - get_child_paths / get_child_names / get_children / get_root:
      Hierarchical queries
    - map / filter: Transformations returning a new PathStore

    Attributes:
        separator: Segment separator used by child queries.
        segment_match: True if descendants must follow the path with a
            separator, False for plain string-prefix matching.

    Example:
        >>> store = PathStore({'/a/x': 1, '/a/y': 2, '/b': 3})
        >>> store.get_child_paths('/a')
        ['/a/x', '/a/y']
        >>> store.map(lambda value, path: value * 10).read('/b')
        30
    """

    __slots__ = (
        '_contents', '_separator', '_segment_match',
        '_subscribers', '_batch_depth', '_batch_dirty',
    )

    def __init__(
        self,
        source: dict | list | PathStore | None = None,
        separator: str = '/',
        segment_match: bool = False,
    ) -> None:
        """Initialize a PathStore.

        Args:
            source: Optional initial data. Can be:
                - dict: {path: value} pairs, in dict order
                - list: (path, value) tuples or bare paths
                - PathStore: Copy entries from another store
            separator: Segment separator (default '/').
            segment_match: If True, a key is a descendant of a path only
                when the path is followed by the separator.

        Raises:
            InvalidSeparatorError: If separator is not a non-empty string.
            TypeError: If source is not dict, list, or PathStore.

        Example:
            >>> PathStore({'/a': 1, '/b': 2})
            >>> PathStore([('/a', 1), '/empty'])
            >>> PathStore(other_store)  # copy
            >>> PathStore(separator='.', segment_match=True)
        """
        if not isinstance(separator, str) or not separator:
            raise InvalidSeparatorError(
                f"separator must be a non-empty string, got {separator!r}"
            )
        self._contents: dict[str, T] = {}
        self._separator = separator
        self._segment_match = bool(segment_match)
        self._subscribers: dict[str, SubscriberCallback] = {}
        self._batch_depth = 0
        self._batch_dirty = False

        if source is not None:
            self._load_source(source)

    def _load_source(self, source: dict | list | PathStore) -> None:
        """Load data from source into this PathStore.

        Raises:
            TypeError: If source is not dict, list, or PathStore.
        """
        if isinstance(source, dict):
            load_from_dict(self, source)
        elif isinstance(source, PathStore):
            load_from_pathstore(self, source)
        elif isinstance(source, list):
            load_from_list(self, source)
        else:
            raise TypeError(
                f"source must be dict, list, or PathStore, not {type(source).__name__}"
            )

    def _spawn(self) -> PathStore:
        """Return an empty store with the same configuration."""
        return PathStore(separator=self._separator, segment_match=self._segment_match)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing stored paths."""
        return f"PathStore({list(self._contents)})"

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._contents)

    def __iter__(self) -> Iterator[str]:
        """Iterate over paths in enumeration order."""
        return iter(list(self._contents))

    def __contains__(self, path: object) -> bool:
        """Check if an entry exists at exactly this path."""
        return path in self._contents

    def __getitem__(self, path: str) -> T:
        """Get the value at path.

        Raises:
            KeyError: If no entry exists at path.
        """
        self._check_path(path)
        return self._contents[path]

    def __setitem__(self, path: str, value: T) -> None:
        """Insert value at path (notifying subscribers)."""
        self.insert(path, value)

    # ==================== Configuration ====================

    @property
    def separator(self) -> str:
        """The segment separator."""
        return self._separator

    @property
    def segment_match(self) -> bool:
        """True if prefix matching requires a separator boundary."""
        return self._segment_match

    # ==================== Path Utilities ====================

    @staticmethod
    def _check_path(path: Any, argname: str = 'path') -> None:
        """Raise InvalidPathError unless path is a string."""
        if not isinstance(path, str):
            raise InvalidPathError(
                f"{argname} must be a string, not {type(path).__name__}"
            )

    def _is_descendant(self, key: str, path: str) -> bool:
        """True if key lies below path (never when key == path)."""
        if key == path:
            return False
        if not self._segment_match or not path or path.endswith(self._separator):
            return key.startswith(path)
        return key.startswith(path + self._separator)

    def _matches(self, key: str, path: str) -> bool:
        """True if key is path itself or one of its descendants."""
        return key == path or self._is_descendant(key, path)

    def _split_child(self, path: str, key: str) -> tuple[str, str]:
        """Return (name, parent) of the segment of key right below path.

        One leading separator is stripped from the remainder. When the
        remainder does not start with a separator (e.g. '/foobar' under
        '/foo'), the name is the rest of the partially matched segment.
        """
        sep = self._separator
        start = len(path)
        if key.startswith(sep, start):
            start += len(sep)
        name = key[start:].split(sep, 1)[0]
        head = key[:start].split(sep)
        parent = head[-2] if len(head) > 1 else ''
        return name, parent

    # ==================== Mutations ====================

    def insert(self, path: str, value: T | None = None, notify: bool = True) -> PathStore[T]:
        """Store value at path, overwriting any existing entry.

        Args:
            path: Any string.
            value: Any value, None included.
            notify: If False, subscribers are not called.

        Returns:
            This store, for chaining.

        Example:
            >>> store.insert('/a', 1).insert('/b', 2)
        """
        self._check_path(path)
        self._contents[path] = value
        if notify:
            self.notify()
        return self

    def remove(self, path: str, notify: bool = True) -> PathStore[T]:
        """Remove the entry at path and all of its descendants.

        Removing a path that matches nothing is a no-op, but still
        publishes a notification when notify is True.

        Returns:
            This store, for chaining.
        """
        self._check_path(path)
        doomed = [key for key in list(self._contents) if self._matches(key, path)]
        for key in doomed:
            del self._contents[key]
        logger.debug("remove %r: %d entries deleted", path, len(doomed))
        if notify:
            self.notify()
        return self

    def move(self, path: str, move_to: str, notify: bool = True) -> PathStore[T]:
        """Relocate the entry at path and its descendants under move_to.

        Each descendant keeps the remainder of its key verbatim:
        '/foo/bar/x' moved from '/foo/bar' to '/baz' becomes '/baz/x'.
        Relocated entries are appended to the enumeration order; an
        existing entry at a target key is overwritten in place.

        Args:
            path: Source path.
            move_to: Target path.
            notify: If False, subscribers are not called.

        Returns:
            This store, for chaining.

        Example:
            >>> store.move('/foo/bar', '/baz')
        """
        self._check_path(path)
        self._check_path(move_to, 'move_to')
        if move_to != path:
            sources = [path] if path in self._contents else []
            sources.extend(self.get_child_paths(path))
            # Detach everything first: source and target subtrees may overlap
            moved = [
                (move_to + key[len(path):], self._contents.pop(key))
                for key in sources
            ]
            for new_key, value in moved:
                self._contents[new_key] = value
            logger.debug("move %r -> %r: %d entries relocated", path, move_to, len(moved))
        if notify:
            self.notify()
        return self

    def clear(self, notify: bool = True) -> PathStore[T]:
        """Remove all entries.

        Returns:
            This store, for chaining.
        """
        self._contents.clear()
        if notify:
            self.notify()
        return self

    # ==================== Queries ====================

    def read(self, path: str, default: Any = None) -> T | Any:
        """Return the value at path, or default if there is no entry."""
        self._check_path(path)
        return self._contents.get(path, default)

    @property
    def size(self) -> int:
        """Number of stored entries."""
        return len(self._contents)

    def get_paths(self) -> list[str]:
        """Return all paths in enumeration order."""
        return list(self._contents)

    def get_contents(self) -> list[T]:
        """Return all values, in the same order as get_paths()."""
        return list(self._contents.values())

    def iter_items(self) -> Iterator[tuple[str, T]]:
        """Yield (path, value) pairs in enumeration order."""
        yield from list(self._contents.items())

    def items(self) -> list[tuple[str, T]]:
        """Return list of (path, value) pairs in enumeration order."""
        return list(self._contents.items())

    def iter_subtree(self, path: str) -> Iterator[tuple[str, T]]:
        """Yield (path, value) for the entry at path and its descendants."""
        self._check_path(path)
        for key, value in list(self._contents.items()):
            if self._matches(key, path):
                yield key, value

    def get_child_paths(self, path: str) -> list[str]:
        """Return every descendant of path, at any depth.

        Example:
            >>> PathStore(['/a', '/a/b', '/a/b/c', '/z']).get_child_paths('/a')
            ['/a/b', '/a/b/c']
        """
        self._check_path(path)
        return [key for key in self._contents if self._is_descendant(key, path)]

    def get_child_names(self, path: str) -> list[str]:
        """Return the names of the segments immediately below path.

        Names are deduplicated, keeping first-seen order.

        Example:
            >>> store = PathStore(['/foo/bar', '/foo/bar/x', '/foo/baz/y'])
            >>> store.get_child_names('/foo')
            ['bar', 'baz']
        """
        return [child.name for child in self.get_children(path)]

    def get_children(self, path: str) -> list[PathStoreChild]:
        """Return one PathStoreChild per segment immediately below path.

        The first descendant producing a given name wins; later ones
        are dropped. Keys equal to path plus a trailing separator
        produce an empty name and are skipped.

        Args:
            path: Parent path ('' for the root).

        Returns:
            List of PathStoreChild in first-seen order.
        """
        children: dict[str, PathStoreChild] = {}
        for key in self.get_child_paths(path):
            name, parent = self._split_child(path, key)
            if name and name not in children:
                children[name] = PathStoreChild(key, name, parent)
        return list(children.values())

    def get_root(self) -> list[PathStoreChild]:
        """Return the top-level children (get_children(''))."""
        return self.get_children('')

    # ==================== Transformations ====================

    def map(self, fn: Callable[[T, str], R]) -> PathStore[R]:
        """Build a new store holding fn(value, path) at every path.

        The source store is left untouched.

        Example:
            >>> PathStore({'/a': 1}).map(lambda value, path: value * 2).read('/a')
            2
        """
        result: PathStore[R] = self._spawn()
        for path, value in self.iter_items():
            result.insert(path, fn(value, path))
        return result

    def filter(self, fn: Callable[[T, str], bool]) -> PathStore[T]:
        """Build a new store with the entries for which fn(value, path) is true."""
        result: PathStore[T] = self._spawn()
        for path, value in self.iter_items():
            if fn(value, path):
                result.insert(path, value)
        return result

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, T]:
        """Return a shallow dict copy of the contents."""
        return dict(self._contents)
