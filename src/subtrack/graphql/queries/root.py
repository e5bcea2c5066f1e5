"""
Root GraphQL query definitions
"""

import strawberry

from ..types.subscription import Subscription


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def subscriptions(self, info: strawberry.Info) -> list[Subscription]:
        """Get all subscriptions."""
        from ..resolvers.subscription import resolve_subscriptions

        return await resolve_subscriptions(info)

    @strawberry.field
    async def subscription(self, info: strawberry.Info, id: strawberry.ID) -> Subscription | None:
        """Get a subscription by ID."""
        from ..resolvers.subscription import resolve_subscription_by_id

        return await resolve_subscription_by_id(info, str(id))

    @strawberry.field
    async def categories(self, info: strawberry.Info) -> list[str]:
        """Get the distinct subscription categories."""
        from ..resolvers.subscription import resolve_categories

        return await resolve_categories(info)
