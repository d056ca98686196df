"""Request signing and parameter canonicalization for the Backlot API."""

from __future__ import annotations

import base64
import hashlib
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Union
from urllib.parse import quote_plus

from .config import ClientConfig

# Form encoding that also escapes "~", which quote_plus leaves alone.
def encode_value(value: object) -> str:
    return quote_plus(str(value), safe="").replace("~", "%7E")


# base64 of a 32 byte digest is 44 characters, the last one always "=".
SIGNATURE_LENGTH = 43

Body = Union[str, bytes]


def generate_signature(
    secret_key: str,
    method: str,
    path: str,
    params: Mapping[str, str],
    body: Body = "",
) -> str:
    """Derive the URL-safe signature for a request.

    The source string is the secret key, the uppercased method, the path, every
    ``key=value`` pair sorted by key with no separator, then the raw body.
    Values are used exactly as given, so pass the canonicalized parameters.
    """
    source = secret_key + method.upper() + path
    for key in sorted(params):
        source += f"{key}={params[key]}"

    raw = source.encode("utf-8")
    raw += body if isinstance(body, bytes) else body.encode("utf-8")

    digest = base64.b64encode(hashlib.sha256(raw).digest()).decode("ascii")
    signature = quote_plus(digest[:SIGNATURE_LENGTH], safe="")
    return signature.rstrip("=")


def round_expiration(now: float, expiration_window: int, round_up_time: int) -> int:
    # Always moves to the next boundary, even when already on one.
    expires = int(now) + expiration_window
    return expires + round_up_time - (expires % round_up_time)


@dataclass
class RequestSigner:
    config: ClientConfig
    clock: Callable[[], float] = field(default=time.time)

    def expiration(self) -> int:
        return round_expiration(self.clock(), self.config.expiration_window, self.config.round_up_time)

    def sanitize_params(self, params: Mapping[str, object]) -> Dict[str, str]:
        """Return a URL-encoded copy of ``params`` with ``expires`` and ``api_key`` filled in."""
        sanitized = {key: encode_value(value) for key, value in params.items()}
        if "expires" not in sanitized:
            sanitized["expires"] = str(self.expiration())
        if "api_key" not in sanitized:
            sanitized["api_key"] = self.config.api_key
        return sanitized

    def generate_signature(self, method: str, path: str, params: Mapping[str, str], body: Body = "") -> str:
        return generate_signature(self.config.secret_key, method, path, params, body)

    def sign(self, method: str, path: str, params: Mapping[str, object], body: Body = "") -> Dict[str, str]:
        signed = self.sanitize_params(params)
        signed["signature"] = self.generate_signature(method, path, signed, body)
        return signed


__all__ = ["RequestSigner", "encode_value", "generate_signature", "round_expiration", "SIGNATURE_LENGTH"]
