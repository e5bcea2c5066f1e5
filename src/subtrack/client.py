"""
GraphQL client for the Subtrack endpoint.

The client is preconfigured with ``settings.client_endpoint`` and keeps an
in-memory cache of query responses per instance. Any mutation clears the cache
so later reads observe the change.
"""

import copy
import json
from types import TracebackType
from typing import Any

import httpx

from .config import settings
from .logging import get_logger

logger = get_logger(__name__)

SUBSCRIPTION_FIELDS = "id name price category renewalDate"

SUBSCRIPTIONS_QUERY = f"query Subscriptions {{ subscriptions {{ {SUBSCRIPTION_FIELDS} }} }}"
SUBSCRIPTION_QUERY = (
    f"query Subscription($id: ID!) {{ subscription(id: $id) {{ {SUBSCRIPTION_FIELDS} }} }}"
)
CATEGORIES_QUERY = "query Categories { categories }"

ADD_SUBSCRIPTION_MUTATION = f"""
mutation AddSubscription($name: String!, $price: Float!, $category: String!, $renewalDate: String!) {{
    addSubscription(name: $name, price: $price, category: $category, renewalDate: $renewalDate) {{
        {SUBSCRIPTION_FIELDS}
    }}
}}
"""

EDIT_SUBSCRIPTION_MUTATION = f"""
mutation EditSubscription(
    $id: ID!, $name: String, $price: Float, $category: String, $renewalDate: String
) {{
    editSubscription(
        id: $id, name: $name, price: $price, category: $category, renewalDate: $renewalDate
    ) {{
        {SUBSCRIPTION_FIELDS}
    }}
}}
"""

DELETE_SUBSCRIPTION_MUTATION = """
mutation DeleteSubscription($id: ID!) {
    deleteSubscription(id: $id)
}
"""


class GraphQLClientError(Exception):
    """Raised when a GraphQL response carries an ``errors`` payload."""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        self.messages = [str(error.get("message", "Unknown error")) for error in errors]
        super().__init__("; ".join(self.messages))


class SubscriptionClient:
    """Async client for the subscription GraphQL API.

    Args:
        endpoint: GraphQL URL. Defaults to ``settings.client_endpoint``.
        http_client: Pre-built httpx client, e.g. one bound to an ASGI app in
            tests. A client passed in is not closed by ``aclose``.
        timeout: Request timeout in seconds for the client created here.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self.endpoint = endpoint or settings.client_endpoint
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.client_timeout
        )
        self._cache: dict[str, dict[str, Any]] = {}

    async def __aenter__(self) -> "SubscriptionClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    def clear_cache(self) -> None:
        self._cache.clear()

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        mutation: bool = False,
    ) -> dict[str, Any]:
        """Send a GraphQL document and return its ``data`` payload.

        Query responses are served from the cache when the same document and
        variables were fetched before. Mutations always reach the server and
        invalidate the cache.

        Raises:
            GraphQLClientError: If the response contains errors.
            httpx.HTTPStatusError: If the server answers with a non-2xx status.
        """
        cache_key = json.dumps({"query": query, "variables": variables or {}}, sort_keys=True)
        if not mutation and cache_key in self._cache:
            logger.debug("GraphQL cache hit", endpoint=self.endpoint)
            return copy.deepcopy(self._cache[cache_key])

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await self._http.post(self.endpoint, json=payload)
        response.raise_for_status()
        body = response.json()

        if mutation:
            # Mutations may change anything a cached query returned
            self._cache.clear()

        if body.get("errors"):
            logger.warning(
                "GraphQL request returned errors",
                endpoint=self.endpoint,
                errors=[error.get("message") for error in body["errors"]],
            )
            raise GraphQLClientError(body["errors"])

        data = body.get("data") or {}
        if not mutation:
            # Callers get their own copy so edits to a result never reach the cache
            self._cache[cache_key] = copy.deepcopy(data)
        return data

    async def subscriptions(self) -> list[dict[str, Any]]:
        data = await self.execute(SUBSCRIPTIONS_QUERY)
        return data["subscriptions"]

    async def subscription(self, id: str) -> dict[str, Any] | None:
        data = await self.execute(SUBSCRIPTION_QUERY, {"id": id})
        return data["subscription"]

    async def categories(self) -> list[str]:
        data = await self.execute(CATEGORIES_QUERY)
        return data["categories"]

    async def add_subscription(
        self, name: str, price: float, category: str, renewal_date: str
    ) -> dict[str, Any]:
        data = await self.execute(
            ADD_SUBSCRIPTION_MUTATION,
            {"name": name, "price": price, "category": category, "renewalDate": renewal_date},
            mutation=True,
        )
        return data["addSubscription"]

    async def edit_subscription(
        self,
        id: str,
        *,
        name: str | None = None,
        price: float | None = None,
        category: str | None = None,
        renewal_date: str | None = None,
    ) -> dict[str, Any]:
        """Edit a subscription, sending only the fields given."""
        variables: dict[str, Any] = {"id": id}
        for key, value in (
            ("name", name),
            ("price", price),
            ("category", category),
            ("renewalDate", renewal_date),
        ):
            if value is not None:
                variables[key] = value

        data = await self.execute(EDIT_SUBSCRIPTION_MUTATION, variables, mutation=True)
        return data["editSubscription"]

    async def delete_subscription(self, id: str) -> bool:
        data = await self.execute(DELETE_SUBSCRIPTION_MUTATION, {"id": id}, mutation=True)
        return data["deleteSubscription"]
