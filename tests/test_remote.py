# tests/test_remote.py

from __future__ import annotations

import httpx
import pytest

from taskpad.errors import RemoteFetchError
from taskpad.tasks.remote import HttpRemoteTaskSource, parse_remote_items
from taskpad.tasks.task_models import RemoteTask

URL = "https://remote.test/todos"


def _source(handler) -> HttpRemoteTaskSource:
    return HttpRemoteTaskSource(URL, timeout_seconds=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_parses_items_and_ignores_extra_fields() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[
                {"userId": 1, "id": 7, "title": "delectus aut autem", "completed": False},
                {"title": "done already", "completed": True},
                {"completed": True},
                "garbage",
            ],
        )

    items = await _source(handler).fetch()

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == URL
    assert items == [
        RemoteTask(title="delectus aut autem", completed=False),
        RemoteTask(title="done already", completed=True),
        RemoteTask(title="", completed=True),
        RemoteTask(title="", completed=False),
    ]


@pytest.mark.asyncio
async def test_non_2xx_is_a_fetch_error() -> None:
    source = _source(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(RemoteFetchError, match="HTTP 500"):
        await source.fetch()


@pytest.mark.asyncio
async def test_malformed_json_is_a_fetch_error() -> None:
    source = _source(lambda request: httpx.Response(200, text="{not json"))
    with pytest.raises(RemoteFetchError):
        await source.fetch()


@pytest.mark.asyncio
async def test_non_array_body_is_a_fetch_error() -> None:
    source = _source(lambda request: httpx.Response(200, json={"title": "x"}))
    with pytest.raises(RemoteFetchError):
        await source.fetch()


@pytest.mark.asyncio
async def test_transport_error_is_a_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteFetchError, match="Network error"):
        await _source(handler).fetch()


@pytest.mark.asyncio
async def test_missing_url_is_a_fetch_error() -> None:
    with pytest.raises(RemoteFetchError):
        await HttpRemoteTaskSource("").fetch()


def test_parse_remote_items_tolerates_nulls() -> None:
    assert parse_remote_items([{"title": None, "completed": None}]) == [RemoteTask(title="")]
