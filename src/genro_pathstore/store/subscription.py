# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Change notification for PathStore.

Subscribers are plain callables registered under an id. A subscriber is
called once with the store as soon as it subscribes, then again after
every mutation that was not run with ``notify=False``.

Example:
    >>> store = PathStore()
    >>> store.subscribe('ui', lambda s: print(s.size))
    0
    >>> _ = store.insert('/a', 1)
    1
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)

SubscriberCallback = Callable[[Any], Any]


class SubscriptionMixin:
    """Observer registry with replay-latest semantics.

    The host class must provide the ``_subscribers`` dict and the
    ``_batch_depth`` / ``_batch_dirty`` counters (see PathStore.__init__).
    """

    __slots__ = ()

    _subscribers: dict[str, SubscriberCallback]
    _batch_depth: int
    _batch_dirty: bool

    def subscribe(self, subscriber_id: str, callback: SubscriberCallback) -> None:
        """Register a callback and replay the current state to it.

        Args:
            subscriber_id: Unique id for the subscriber. Subscribing again
                with the same id replaces the previous callback.
            callback: Called with the store instance.

        Raises:
            TypeError: If callback is not callable.
        """
        if not callable(callback):
            raise TypeError(f"callback must be callable, not {type(callback).__name__}")
        self._subscribers.pop(subscriber_id, None)
        self._subscribers[subscriber_id] = callback
        logger.debug("subscriber %r registered", subscriber_id)
        callback(self)

    def unsubscribe(self, subscriber_id: str) -> None:
        """Remove a subscriber. Unknown ids are ignored."""
        if self._subscribers.pop(subscriber_id, None) is not None:
            logger.debug("subscriber %r removed", subscriber_id)

    @property
    def subscribers(self) -> tuple[str, ...]:
        """Ids of the registered subscribers, in subscription order."""
        return tuple(self._subscribers)

    def notify(self) -> None:
        """Publish the store to every subscriber.

        Inside a batch() block the notification is deferred to the end
        of the outermost block.
        """
        if self._batch_depth:
            self._batch_dirty = True
            return
        # callbacks may (un)subscribe while being notified
        for callback in list(self._subscribers.values()):
            callback(self)

    @contextmanager
    def batch(self) -> Iterator[Any]:
        """Group mutations into a single notification.

        Example:
            >>> with store.batch():
            ...     store.insert('/a', 1).insert('/b', 2)
            ... # subscribers are called once here
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            # mutations done before an exception are still published
            if not self._batch_depth and self._batch_dirty:
                self._batch_dirty = False
                self.notify()
