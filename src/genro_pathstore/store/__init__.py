# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore package - Path-addressed data container.

This package provides the PathStore class, a flat mapping from path
strings to values with prefix-based hierarchical queries and reactive
subscriptions.

The package is organized into:
- core: Main PathStore class with mutations, queries and transformations
- loading: Functions for loading data from dict, list, or PathStore sources
- subscription: Replay-latest change notification

Example:
    >>> from genro_pathstore import PathStore
    >>> store = PathStore()
    >>> store.insert('/config/name', 'MyApp').read('/config/name')
    'MyApp'
"""

from .core import PathStore
from .subscription import SubscriberCallback, SubscriptionMixin

__all__ = ["PathStore", "SubscriberCallback", "SubscriptionMixin"]
