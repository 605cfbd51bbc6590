import httpx
import pytest

from refsearch.contracts.reference_search_v1 import AdapterQueryError
from refsearch.search.data_client import (
    ReferenceDataClient,
    build_search_params,
    escape_like,
    quote_value,
)


def test_escape_like_makes_metacharacters_literal():
    assert escape_like("100%") == "100\\%"
    assert escape_like("a_b") == "a\\_b"
    assert escape_like("c:\\x") == "c:\\\\x"
    assert escape_like("a*b") == "a_b"


def test_quote_value_only_when_reserved_characters_present():
    assert quote_value("*us*") == "*us*"
    assert quote_value("*a.b*") == '"*a.b*"'
    assert quote_value('*say "hi"*') == '"*say \\"hi\\"*"'


def test_search_params_shape():
    params = build_search_params(
        columns=["id", "code", "name", "description"],
        match_columns=["code", "name", "description"],
        query="leave",
        limit=10,
        eq_filters={"category": "leave_type"},
        order_column="display_order",
    )
    assert params == [
        ("select", "id,code,name,description"),
        ("is_active", "eq.true"),
        ("category", "eq.leave_type"),
        ("or", "(code.ilike.*leave*,name.ilike.*leave*,description.ilike.*leave*)"),
        ("order", "display_order.asc"),
        ("limit", "10"),
    ]


def test_search_params_without_active_filter():
    params = dict(
        build_search_params(["id", "name"], ["name"], "ab", 5, active_column=None)
    )
    assert "is_active" not in params
    assert params["or"] == "(name.ilike.*ab*)"


@pytest.mark.asyncio
async def test_client_sends_auth_headers_and_bounded_query():
    captured: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json=[{"id": "1", "code": "USD", "name": "US Dollar"}, "junk"])

    client = ReferenceDataClient(
        "https://hr.example.test/", api_key="anon-key", transport=httpx.MockTransport(handler)
    )
    try:
        rows = await client.search_table(
            table="currencies", columns=["id", "code", "name"], match_columns=["code", "name"], query="us", limit=7
        )
    finally:
        await client.close()

    request = captured["request"]
    assert client.base_url == "https://hr.example.test/rest/v1"
    assert request.url.path == "/rest/v1/currencies"
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["authorization"] == "Bearer anon-key"
    assert request.url.params["limit"] == "7"
    assert request.url.params["is_active"] == "eq.true"
    assert rows == [{"id": "1", "code": "USD", "name": "US Dollar"}]


@pytest.mark.asyncio
async def test_client_raises_query_error_on_rejection():
    client = ReferenceDataClient(
        "https://hr.example.test", transport=httpx.MockTransport(lambda r: httpx.Response(400, json={}))
    )
    try:
        with pytest.raises(AdapterQueryError):
            await client.search_table("jobs", ["id", "name"], ["name"], "ab")
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_client_raises_query_error_on_non_list_payload():
    client = ReferenceDataClient(
        "https://hr.example.test", transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"rows": []}))
    )
    try:
        with pytest.raises(AdapterQueryError, match="array"):
            await client.search_table("jobs", ["id", "name"], ["name"], "ab")
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_client_wraps_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = ReferenceDataClient("https://hr.example.test", transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(AdapterQueryError, match="connection refused"):
            await client.search_table("jobs", ["id", "name"], ["name"], "ab")
    finally:
        await client.close()
