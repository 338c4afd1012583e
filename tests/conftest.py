"""Fixtures compartidas: settings, transport falso y sleep que solo registra."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from notiboost.adapters.dispatcher import RequestDispatcher
from notiboost.core.config import ClientSettings


class RecordingSleep:
    """Sustituye a `asyncio.sleep`: guarda los delays sin esperar."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FakeDispatcher:
    """Dispatcher en memoria para testear los wrappers de recursos."""

    def __init__(self, reply: Any = None) -> None:
        self.calls: list[dict[str, Any]] = []
        self.reply = {"ok": True} if reply is None else reply

    async def request(self, method: str, path: str, data: Any = None, *, headers=None) -> Any:
        self.calls.append({"method": method, "path": path, "data": data, "headers": headers})
        return self.reply


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_KEY", "BASE_URL", "TIMEOUT_SECONDS", "MAX_RETRIES", "USER_AGENT"):
        monkeypatch.delenv(f"NOTIBOOST_{name}", raising=False)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def fake_dispatcher() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture
def make_dispatcher(sleep: RecordingSleep) -> Callable[..., tuple[RequestDispatcher, list[httpx.Request]]]:
    """Construye un `RequestDispatcher` sobre `httpx.MockTransport`.

    Devuelve el dispatcher y la lista de requests recibidas por el handler.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response], **options: Any):
        seen: list[httpx.Request] = []

        def _recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        settings = ClientSettings(
            api_key=options.pop("api_key", "test-key"),
            base_url=options.pop("base_url", "https://api.test.local"),
            **options,
        )
        dispatcher = RequestDispatcher(
            settings,
            transport=httpx.MockTransport(_recording_handler),
            sleep=sleep,
        )
        return dispatcher, seen

    return _make
