"""Cliente: configuración y llamadas end-to-end sobre `httpx.MockTransport`."""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import ValidationError

from notiboost import ClientSettings, ConfigurationError, NotiBoost


def test_api_key_is_required() -> None:
    with pytest.raises(ConfigurationError):
        NotiBoost()


def test_invalid_options_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        NotiBoost("key", base_url="ftp://example.com")
    with pytest.raises(ConfigurationError):
        NotiBoost("key", max_retries=-1)


def test_defaults() -> None:
    client = NotiBoost("key")

    assert client.settings.base_url == "https://api.notiboost.com"
    assert client.settings.timeout_seconds == 30.0
    assert client.settings.max_retries == 3


def test_zero_retries_is_honored() -> None:
    assert NotiBoost("key", max_retries=0).settings.max_retries == 0


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTIBOOST_API_KEY", "env-key")
    monkeypatch.setenv("NOTIBOOST_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("NOTIBOOST_MAX_RETRIES", "1")

    client = NotiBoost(timeout=5)

    assert client.settings.api_key == "env-key"
    assert client.settings.base_url == "http://localhost:9000"
    assert client.settings.max_retries == 1
    assert client.settings.timeout_seconds == 5.0


def test_explicit_key_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTIBOOST_API_KEY", "env-key")

    assert NotiBoost("explicit").settings.api_key == "explicit"


def test_settings_are_frozen() -> None:
    settings = ClientSettings(api_key="key")

    with pytest.raises(ValidationError):
        settings.max_retries = 9  # type: ignore[misc]


@pytest.mark.asyncio
async def test_templates_list_end_to_end(sleep) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": [{"id": "tpl_1"}]})

    client = NotiBoost(
        "nb_key",
        base_url="https://api.test.local",
        transport=httpx.MockTransport(handler),
        sleep=sleep,
    )

    result = await client.templates.list({"channel": "zns"})

    assert result == {"data": [{"id": "tpl_1"}]}
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/v1/templates"
    assert seen[0].url.query == b"channel=zns"
    assert seen[0].headers["authorization"] == "Bearer nb_key"


@pytest.mark.asyncio
async def test_event_ingest_end_to_end_with_idempotency_key(sleep) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(202, json={"accepted": True})

    client = NotiBoost("nb_key", transport=httpx.MockTransport(handler), sleep=sleep)

    result = await client.events.ingest(
        {"event_name": "order_paid", "event_id": "e1", "user_id": "u1"},
        idempotency_key="order-1",
    )

    assert result == {"accepted": True}
    assert str(seen[0].url) == "https://api.notiboost.com/api/v1/events"
    assert seen[0].headers["idempotency-key"] == "order-1"
    payload = json.loads(seen[0].content)
    assert payload["event_id"] == "e1"
    assert "occurred_at" in payload


@pytest.mark.asyncio
async def test_send_passthrough(sleep) -> None:
    client = NotiBoost(
        "nb_key",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, text="pong", headers={"X-RateLimit-Remaining": "7"})
        ),
        sleep=sleep,
    )

    response = await client.send("GET", "/ping")

    assert response.data == {"message": "pong"}
    assert response.rate_limit.remaining == 7
    assert response.rate_limit.limit is None


def test_retry_count_has_no_upper_cap() -> None:
    assert NotiBoost("key", max_retries=11).settings.max_retries == 11
