# src/taskpad/tasks/remote.py

from __future__ import annotations

"""
HTTP source of the remote task collection.

One GET, no body, JSON array of {title?, completed?} objects in the response.
Anything else (transport error, non-2xx, malformed JSON, non-array body)
is a RemoteFetchError.
"""

import logging
from typing import Any

import httpx

from ..errors import RemoteFetchError
from .task_models import RemoteTask

logger = logging.getLogger(__name__)


def parse_remote_items(payload: Any) -> list[RemoteTask]:
    if not isinstance(payload, list):
        raise RemoteFetchError(
            f"Remote payload must be a JSON array, got {type(payload).__name__}"
        )
    return [RemoteTask.from_json(item) for item in payload]


def _make_timeout_obj(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=connect_s,
        read=read_s,
        write=10.0,
        pool=connect_s,
    )


class HttpRemoteTaskSource:
    """
    RemoteTaskSource backed by httpx.

    A fresh AsyncClient is opened per fetch and closed on every exit path.
    `transport` is injectable so tests can use httpx.MockTransport.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 10.0,
        connect_timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = (url or "").strip()
        self._timeout = _make_timeout_obj(
            connect_s=float(connect_timeout_seconds),
            read_s=max(float(timeout_seconds), float(connect_timeout_seconds)),
        )
        self._transport = transport

    async def fetch(self) -> list[RemoteTask]:
        if not self.url:
            raise RemoteFetchError("Remote URL is not set. Set TASKPAD_REMOTE_URL in your .env.")

        logger.info("Remote: GET %s", self.url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as e:
            raise RemoteFetchError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise RemoteFetchError(f"Network error: {e.__class__.__name__}: {e}") from e
        except ValueError as e:
            raise RemoteFetchError(f"Malformed JSON from {self.url}") from e

        items = parse_remote_items(payload)
        logger.info("Remote: received %d items", len(items))
        return items
