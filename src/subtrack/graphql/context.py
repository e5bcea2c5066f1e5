"""
Access to per-request resources from resolvers
"""

import strawberry

from ..store import SubscriptionStore


def get_store_from_info(info: strawberry.Info) -> SubscriptionStore:
    """Return the store the application placed in the GraphQL context."""
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("Subscription store is not configured for this request")
    return store
