"""
Subscription GraphQL type definitions
"""

import strawberry

from ...store.models import SubscriptionRecord


@strawberry.type(name="Subscription")
class Subscription:
    """A tracked subscription."""

    id: strawberry.ID
    name: str
    price: float
    category: str
    renewal_date: str

    @classmethod
    def from_record(cls, record: SubscriptionRecord) -> "Subscription":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            price=record.price,
            category=record.category,
            renewal_date=record.renewal_date,
        )
