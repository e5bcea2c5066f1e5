from __future__ import annotations

import strawberry

from ...logging import get_logger
from ...store import SubscriptionCreate, SubscriptionUpdate
from ..context import get_store_from_info
from ..types.subscription import Subscription

logger = get_logger(__name__)


# Query resolvers
async def resolve_subscriptions(info: strawberry.Info) -> list[Subscription]:
    """Return every subscription in insertion order."""
    store = get_store_from_info(info)
    return [Subscription.from_record(record) for record in store.list_all()]


async def resolve_subscription_by_id(info: strawberry.Info, id: str) -> Subscription | None:
    """Return a single subscription, or None when the id is unknown."""
    store = get_store_from_info(info)
    record = store.find_by_id(id)
    if record is None:
        logger.info("Subscription not found", subscription_id=id)
        return None
    return Subscription.from_record(record)


async def resolve_categories(info: strawberry.Info) -> list[str]:
    """Return each distinct category once."""
    return get_store_from_info(info).list_categories()


# Mutation resolvers
async def add_subscription(info: strawberry.Info, create: SubscriptionCreate) -> Subscription:
    """Add a subscription; the store assigns its id."""
    store = get_store_from_info(info)
    record = store.insert(create)

    logger.info(
        "Subscription added",
        subscription_id=record.id,
        name=record.name,
        category=record.category,
    )
    return Subscription.from_record(record)


async def edit_subscription(
    info: strawberry.Info, id: str, update: SubscriptionUpdate
) -> Subscription:
    """
    Overwrite the supplied fields of a subscription.

    Unknown ids raise SubscriptionNotFoundError, which strawberry reports in
    the response's ``errors`` list.
    """
    store = get_store_from_info(info)
    record = store.update(id, update)

    logger.info(
        "Subscription edited",
        subscription_id=record.id,
        updated_fields=sorted(update.changes()),
    )
    return Subscription.from_record(record)


async def delete_subscription(info: strawberry.Info, id: str) -> bool:
    """Delete a subscription. Unknown ids yield False rather than an error."""
    store = get_store_from_info(info)
    removed = store.remove(id)

    if removed:
        logger.info("Subscription deleted", subscription_id=id)
    else:
        logger.info("Subscription to delete not found", subscription_id=id)
    return removed
