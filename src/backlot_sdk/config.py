"""Configuration objects for the Backlot Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

from . import __version__

BASE_URL_POLICIES = ("by_method", "cache_only", "authoritative_only")


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and endpoint settings, resolved once when the client is built.

    ``secret_key`` is only ever used as signing input and is never sent over
    the wire. ``expiration_window`` and ``round_up_time`` are in seconds.
    ``base_url_policy`` decides which endpoint a request goes to:

    * ``by_method``: GET reads go to ``cache_base_url``, everything else to ``base_url``
    * ``cache_only``: every request goes to ``cache_base_url``
    * ``authoritative_only``: every request goes to ``base_url``
    """

    api_key: str
    secret_key: str
    base_url: str = "https://api.ooyala.com"
    cache_base_url: str = "http://cdn.api.ooyala.com"
    expiration_window: int = 15
    round_up_time: int = 300
    base_url_policy: str = "by_method"
    timeout: float = 10.0
    user_agent: str = f"backlot-sdk-python/{__version__}"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.round_up_time <= 0:
            raise ValueError("round_up_time must be a positive number of seconds")
        if self.expiration_window < 0:
            raise ValueError("expiration_window must not be negative")
        if self.base_url_policy not in BASE_URL_POLICIES:
            raise ValueError(
                f"Unknown base_url_policy {self.base_url_policy!r}, expected one of {', '.join(BASE_URL_POLICIES)}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        values: Dict[str, Any] = {
            "api_key": os.environ.get("BACKLOT_API_KEY"),
            "secret_key": os.environ.get("BACKLOT_SECRET_KEY"),
        }
        optional = {
            "base_url": ("BACKLOT_BASE_URL", str),
            "cache_base_url": ("BACKLOT_CACHE_BASE_URL", str),
            "expiration_window": ("BACKLOT_EXPIRATION_WINDOW", int),
            "round_up_time": ("BACKLOT_ROUND_UP_TIME", int),
            "base_url_policy": ("BACKLOT_BASE_URL_POLICY", str),
            "timeout": ("BACKLOT_TIMEOUT", float),
        }
        for name, (env_name, cast) in optional.items():
            raw = os.environ.get(env_name)
            if raw:
                values[name] = cast(raw.strip())

        values.update(overrides)
        if not values.get("api_key") or not values.get("secret_key"):
            raise ValueError("BACKLOT_API_KEY and BACKLOT_SECRET_KEY must be configured")
        return cls(**values)


__all__ = ["ClientConfig", "BASE_URL_POLICIES"]
