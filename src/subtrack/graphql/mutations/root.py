"""
Root GraphQL mutation definitions
"""

import strawberry

from ...store import SubscriptionCreate, SubscriptionUpdate
from ..types.subscription import Subscription


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addSubscription")
    async def add_subscription(
        self,
        info: strawberry.Info,
        name: str,
        price: float,
        category: str,
        renewal_date: str,
    ) -> Subscription:
        """Add a new subscription."""
        from ..resolvers.subscription import add_subscription

        create = SubscriptionCreate(
            name=name, price=price, category=category, renewal_date=renewal_date
        )
        return await add_subscription(info, create)

    @strawberry.mutation(name="editSubscription")
    async def edit_subscription(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = strawberry.UNSET,
        price: float | None = strawberry.UNSET,
        category: str | None = strawberry.UNSET,
        renewal_date: str | None = strawberry.UNSET,
    ) -> Subscription:
        """Update the supplied fields of an existing subscription."""
        from ..resolvers.subscription import edit_subscription

        supplied = {
            field: value
            for field, value in {
                "name": name,
                "price": price,
                "category": category,
                "renewal_date": renewal_date,
            }.items()
            if value is not strawberry.UNSET
        }
        return await edit_subscription(info, str(id), SubscriptionUpdate(**supplied))

    @strawberry.mutation(name="deleteSubscription")
    async def delete_subscription(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a subscription; false when it does not exist."""
        from ..resolvers.subscription import delete_subscription

        return await delete_subscription(info, str(id))
