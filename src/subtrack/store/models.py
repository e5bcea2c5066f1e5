"""
Pydantic models for subscription records and the requests that change them
"""

from pydantic import BaseModel


class SubscriptionCreate(BaseModel):
    """Fields required to add a subscription."""

    name: str
    price: float
    category: str
    renewal_date: str


class SubscriptionUpdate(BaseModel):
    """Partial update; only fields that were explicitly set are applied."""

    name: str | None = None
    price: float | None = None
    category: str | None = None
    renewal_date: str | None = None

    def changes(self) -> dict[str, object]:
        """Return the explicitly supplied fields that carry a value."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class SubscriptionRecord(BaseModel):
    """A stored subscription."""

    id: str
    name: str
    price: float
    category: str
    renewal_date: str
