from __future__ import annotations

import dataclasses

import pytest

from backlot_sdk.config import ClientConfig


def test_defaults() -> None:
    cfg = ClientConfig(api_key="key", secret_key="secret")
    assert cfg.base_url == "https://api.ooyala.com"
    assert cfg.cache_base_url == "http://cdn.api.ooyala.com"
    assert cfg.expiration_window == 15
    assert cfg.round_up_time == 300
    assert cfg.base_url_policy == "by_method"
    assert cfg.user_agent.startswith("backlot-sdk-python/")


def test_config_is_immutable() -> None:
    cfg = ClientConfig(api_key="key", secret_key="secret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.api_key = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [{"round_up_time": 0}, {"expiration_window": -1}, {"base_url_policy": "random"}],
)
def test_invalid_values_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        ClientConfig(api_key="key", secret_key="secret", **overrides)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKLOT_API_KEY", "env-key")
    monkeypatch.setenv("BACKLOT_SECRET_KEY", "env-secret")
    monkeypatch.setenv("BACKLOT_BASE_URL", "https://api.internal")
    monkeypatch.setenv("BACKLOT_ROUND_UP_TIME", "60")
    monkeypatch.setenv("BACKLOT_BASE_URL_POLICY", "cache_only")
    monkeypatch.delenv("BACKLOT_EXPIRATION_WINDOW", raising=False)

    cfg = ClientConfig.from_env(timeout=2.5)

    assert cfg.api_key == "env-key"
    assert cfg.secret_key == "env-secret"
    assert cfg.base_url == "https://api.internal"
    assert cfg.round_up_time == 60
    assert cfg.expiration_window == 15
    assert cfg.base_url_policy == "cache_only"
    assert cfg.timeout == 2.5


def test_from_env_requires_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BACKLOT_API_KEY", raising=False)
    monkeypatch.setenv("BACKLOT_SECRET_KEY", "env-secret")
    with pytest.raises(ValueError):
        ClientConfig.from_env()
