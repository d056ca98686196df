"""Python client for the Backlot v2 API using signed, time-bounded requests."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Union

import httpx

from .config import ClientConfig
from .errors import ApiResult, DecodeError, RemoteError, TransportError, UnsupportedMethod
from .signing import Body, RequestSigner
from .transport import HttpTransport, HttpxTransport

logger = logging.getLogger("backlot_sdk.client")

API_PREFIX = "/v2/"
SUPPORTED_METHODS = frozenset({"GET", "POST", "DELETE", "PUT", "PATCH"})
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def normalize_path(path: str) -> str:
    if path.startswith(API_PREFIX):
        return path
    return API_PREFIX + path.lstrip("/")


def serialize_body(body: Any) -> Body:
    """JSON encode ``body``; empty bodies become an empty string, not ``null`` or ``{}``.

    Strings are JSON values like any other, so ``"hello"`` is sent quoted.
    ``bytes`` are taken to be an already serialized JSON document and pass through.
    """
    if not body:
        return ""
    if isinstance(body, bytes):
        return body
    return json.dumps(body, separators=(",", ":"))


class BacklotClient:
    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[HttpTransport] = None,
        http_transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._signer = RequestSigner(config=config, clock=clock)
        self._owns_transport = transport is None
        self._transport: HttpTransport = transport or HttpxTransport(config.timeout, transport=http_transport)

    def __enter__(self) -> "BacklotClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def signer(self) -> RequestSigner:
        return self._signer

    def _headers(self, method: str) -> Dict[str, str]:
        headers = {"User-Agent": self._config.user_agent}
        headers.update(self._config.headers)
        if method in BODY_METHODS:
            headers["Content-Type"] = "application/json"
        return headers

    def select_base_url(self, method: str) -> str:
        policy = self._config.base_url_policy
        if policy == "cache_only":
            return self._config.cache_base_url
        if policy == "authoritative_only":
            return self._config.base_url
        if method.upper() == "GET":
            return self._config.cache_base_url
        return self._config.base_url

    def build_url(self, method: str, path: str, params: Optional[Mapping[str, str]] = None) -> str:
        # Values are already URL-encoded by the signer, so they are joined as-is.
        url = self.select_base_url(method).rstrip("/") + path
        if params:
            query = "&".join(f"{key}={value}" for key, value in params.items())
            url += ("&" if "?" in url else "?") + query
        return url

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Body = "",
    ) -> ApiResult:
        path = normalize_path(path)
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            logger.debug("Rejected unsupported method=%s path=%s", method, path)
            return UnsupportedMethod()

        # The signature covers exactly the bytes sent; GET and DELETE send none.
        content: Union[str, bytes, None] = body if method in BODY_METHODS else None
        signed = self._signer.sign(method, path, params or {}, content or "")
        url = self.build_url(method, path, signed)

        logger.debug("Sending %s %s expires=%s", method, path, signed["expires"])
        try:
            response = self._transport.send(method, url, self._headers(method), content)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Transport failure method=%s path=%s error=%s", method, path, exc)
            return TransportError(code=type(exc).__name__, message=str(exc))

        if response.status_code != 200:
            logger.debug("Request failed method=%s path=%s status=%s", method, path, response.status_code)
            return RemoteError.from_status(response.status_code, response.reason)

        if not response.body.strip():
            return None
        try:
            return json.loads(response.body)
        except ValueError as exc:
            return DecodeError(message=f"Response body is not valid JSON: {exc}")

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self.request("GET", path, params)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self.request("DELETE", path, params)

    def post(self, path: str, body: Any = None, params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self.request("POST", path, params, serialize_body(body))

    def put(self, path: str, body: Any = None, params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self.request("PUT", path, params, serialize_body(body))

    def patch(self, path: str, body: Any = None, params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        return self.request("PATCH", path, params, serialize_body(body))

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()


__all__ = ["BacklotClient", "BODY_METHODS", "SUPPORTED_METHODS", "normalize_path", "serialize_body"]
