"""HTTP transport used by the Backlot client to move bytes over the wire."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Union

import httpx


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    reason: str
    body: bytes


class HttpTransport(Protocol):
    """Anything that can send a fully built request.

    Implementations raise ``httpx.TransportError`` (or a subclass) when the
    request never produced an HTTP response. Retries and timeouts are theirs.
    """

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Union[str, bytes, None] = None,
    ) -> TransportResponse:  # pragma: no cover - interface
        ...

    def close(self) -> None:  # pragma: no cover - interface
        ...


class HttpxTransport:
    def __init__(self, timeout: float = 10.0, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Union[str, bytes, None] = None,
    ) -> TransportResponse:
        response = self._client.request(method, url, headers=dict(headers), content=body or None)
        return TransportResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.content,
        )

    def close(self) -> None:
        self._client.close()


__all__ = ["HttpTransport", "HttpxTransport", "TransportResponse"]
