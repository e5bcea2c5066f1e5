"""
In-memory subscription store
"""

from .memory import SubscriptionNotFoundError, SubscriptionStore
from .models import SubscriptionCreate, SubscriptionRecord, SubscriptionUpdate

__all__ = [
    "SubscriptionStore",
    "SubscriptionNotFoundError",
    "SubscriptionRecord",
    "SubscriptionCreate",
    "SubscriptionUpdate",
]
