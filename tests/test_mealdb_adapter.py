"""
Tests for the TheMealDB adapter using httpx.MockTransport.

Verifies request building (endpoints, query params, API key segment) and the
mapping of remote failures onto TransportError.
"""

import asyncio

import httpx
import pytest

from adapters.mealdb_adapter import MealDBClient
from app.exceptions import TransportError
from test_fixtures import raw_meals

BASE_URL = "https://www.themealdb.com/api/json/v1/1/"


def run(coro):
    return asyncio.run(coro)


def make_client(handler) -> MealDBClient:
    return MealDBClient(BASE_URL, transport=httpx.MockTransport(handler))


async def call(handler, operation: str, *args):
    async with make_client(handler) as client:
        return await getattr(client, operation)(*args)


@pytest.mark.parametrize(
    "operation, args, path, params",
    [
        ("search", ("Arrabiata",), "/api/json/v1/1/search.php", {"s": "Arrabiata"}),
        ("filter_by_category", ("Seafood",), "/api/json/v1/1/filter.php", {"c": "Seafood"}),
        ("filter_by_area", ("Canadian",), "/api/json/v1/1/filter.php", {"a": "Canadian"}),
        (
            "filter_by_ingredient",
            ("chicken breast",),
            "/api/json/v1/1/filter.php",
            {"i": "chicken breast"},
        ),
        ("lookup_by_id", ("52772",), "/api/json/v1/1/lookup.php", {"i": "52772"}),
        ("fetch_random", (), "/api/json/v1/1/random.php", {}),
    ],
)
def test_requests_hit_expected_endpoint(operation, args, path, params):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"meals": raw_meals(1)})

    result = run(call(handler, operation, *args))

    assert result == raw_meals(1)
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == path
    assert dict(seen[0].url.params) == params


def test_base_url_without_trailing_slash_keeps_key_segment():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"meals": []})

    async def go():
        async with MealDBClient(
            "https://www.themealdb.com/api/json/v1/1",
            transport=httpx.MockTransport(handler),
        ) as client:
            return await client.fetch_random()

    run(go())
    assert seen[0].url.path == "/api/json/v1/1/random.php"


@pytest.mark.parametrize("payload", [{"meals": None}, {}, {"meals": "Invalid ID"}, []])
def test_no_meals_gives_empty_result(payload):
    def handler(request):
        return httpx.Response(200, json=payload)

    assert run(call(handler, "lookup_by_id", "0")) == []


@pytest.mark.parametrize("status_code", [400, 404, 500, 503])
def test_error_status_raises_transport_error(status_code):
    def handler(request):
        return httpx.Response(status_code, json={"error": "boom"})

    with pytest.raises(TransportError) as exc_info:
        run(call(handler, "search", "x"))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.http_status == status_code


def test_connection_error_raises_transport_error_without_status():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc_info:
        run(call(handler, "filter_by_area", "Thai"))

    assert exc_info.value.status_code is None
    assert exc_info.value.http_status == 502


def test_timeout_raises_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TransportError):
        run(call(handler, "fetch_random"))


def test_non_json_body_raises_transport_error():
    def handler(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(TransportError) as exc_info:
        run(call(handler, "search", "x"))

    assert exc_info.value.status_code == 200
    assert exc_info.value.http_status == 502
