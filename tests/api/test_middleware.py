"""
Tests for GraphQL operation naming used in request logs
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from subtrack.middleware import extract_graphql_operation_name, graphql_operation_from_document


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ("query Subscriptions { subscriptions { id } }", "Subscriptions"),
        ("mutation AddSubscription($name: String!) { addSubscription }", "mutation:AddSubscription"),
        ("{ categories }", "categories"),
        ('mutation { deleteSubscription(id: "1") }', "mutation:deleteSubscription"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        ("", None),
    ],
)
def test_graphql_operation_from_document(document, expected):
    assert graphql_operation_from_document(document) == expected


def make_request(method: str, path: str = "/graphql", body: bytes = b"", params=None):
    request = MagicMock()
    request.method = method
    request.url.path = path
    request.query_params = params or {}
    request.body = AsyncMock(return_value=body)
    return request


@pytest.mark.asyncio
async def test_extract_prefers_operation_name_from_post_body():
    body = json.dumps({"query": "{ categories }", "operationName": "Cats"}).encode()

    assert await extract_graphql_operation_name(make_request("POST", body=body)) == "Cats"


@pytest.mark.asyncio
async def test_extract_from_get_query_params():
    request = make_request("GET", params={"query": "query Subscriptions { subscriptions { id } }"})

    assert await extract_graphql_operation_name(request) == "Subscriptions"


@pytest.mark.asyncio
async def test_extract_ignores_other_paths_and_bad_json():
    assert await extract_graphql_operation_name(make_request("GET", path="/health")) is None
    assert await extract_graphql_operation_name(make_request("POST", body=b"{not json")) is None
    assert await extract_graphql_operation_name(make_request("POST", body=b"[1, 2]")) is None
