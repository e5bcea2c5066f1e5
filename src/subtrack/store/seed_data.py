"""
Fixture records the store starts with
"""

from .models import SubscriptionRecord

FIXTURE_SUBSCRIPTIONS: tuple[dict[str, object], ...] = (
    {
        "id": "1",
        "name": "Netflix",
        "price": 15.99,
        "category": "Entertainment",
        "renewal_date": "2025-09-01",
    },
    {
        "id": "2",
        "name": "Spotify",
        "price": 9.99,
        "category": "Music",
        "renewal_date": "2025-08-15",
    },
)


def fixture_records() -> list[SubscriptionRecord]:
    """Build fresh copies of the fixture records."""
    return [SubscriptionRecord.model_validate(data) for data in FIXTURE_SUBSCRIPTIONS]
