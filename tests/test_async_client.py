import asyncio
from urllib.parse import parse_qsl

import httpx
import pytest

from congressgov_client import (AsyncCongressAPIClient, CongressHTTPError,
                                InvalidParameterError)


def make_client(handler):
    return AsyncCongressAPIClient(api_key="test_key", transport=httpx.MockTransport(handler))


def _query(request):
    return parse_qsl(request.url.query.decode())


@pytest.mark.asyncio
async def test_get_bills_request_shape():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"bills": [{"number": "1"}]})

    async with make_client(handler) as client:
        out = await client.get_bills(congress=118)

    assert out == {"bills": [{"number": "1"}]}
    req = seen[0]
    assert req.method == "GET"
    assert req.url.path == "/v3/bill/118"
    assert req.headers["x-api-key"] == "test_key"
    assert b"sort=updateDate%2Bdesc" in req.url.query
    assert _query(req)[-1] == ("format", "json")
    assert "congress" not in dict(_query(req))


@pytest.mark.asyncio
async def test_404_raises_with_status():
    def handler(request):
        return httpx.Response(404, json={"error": "not here"})

    async with make_client(handler) as client:
        with pytest.raises(CongressHTTPError) as exc:
            await client.get_amendment_details(117, "HAMDT", "5")
    assert exc.value.status_code == 404
    assert "/amendment/117/hamdt/5" in exc.value.url


@pytest.mark.asyncio
async def test_day_without_month_raises_before_await():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    async with make_client(handler) as client:
        with pytest.raises(InvalidParameterError):
            client.get_bound_congressional_record(2020, day=15)
    assert calls == []


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent():
    def handler(request):
        return httpx.Response(200, json={"path": request.url.path})

    async with make_client(handler) as client:
        results = await asyncio.gather(
            client.get_member("L000174"),
            client.get_hearing(116, "house", 41365),
            client.get_house_roll_call_votes(119, 1),
        )
    assert [r["path"] for r in results] == [
        "/v3/member/L000174",
        "/v3/hearing/116/house/41365",
        "/v3/house-vote/119/1/",
    ]


@pytest.mark.asyncio
async def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("dns failure", request=request)

    async with make_client(handler) as client:
        with pytest.raises(httpx.ConnectError):
            await client.get_congresses()


@pytest.mark.asyncio
async def test_members_defaults():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"members": []})

    async with make_client(handler) as client:
        await client.get_members()

    assert _query(seen[0]) == [
        ("limit", "20"),
        ("offset", "0"),
        ("currentMember", "true"),
        ("format", "json"),
    ]


@pytest.mark.asyncio
async def test_failure_is_logged(caplog):
    def handler(request):
        return httpx.Response(500, text="upstream down")

    client = make_client(handler)
    client.logger.addHandler(caplog.handler)
    try:
        with pytest.raises(CongressHTTPError):
            await client.get_treaties()
    finally:
        client.logger.removeHandler(caplog.handler)
        await client.aclose()
    assert "failed with status 500: upstream down" in caplog.text
    assert "test_key" not in caplog.text


@pytest.mark.asyncio
async def test_aclose_without_context_manager():
    client = make_client(lambda request: httpx.Response(200, json={}))
    await client.get_congresses()
    await client.aclose()
    assert client.client.is_closed
