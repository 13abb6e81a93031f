from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from daia_test.adapters.http_client import build_client
from daia_test.core.config import AppSettings
from daia_test.core.domain.models import TestRun


@pytest.fixture
def daia_response() -> Callable[..., dict]:
    """Construye un body DAIA mínimo con un único documento e item."""

    def build(**item: object) -> dict:
        return {"document": [{"id": "ppn:1", "item": [item]}]}

    return build


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # Ignora un posible .env del desarrollador y desactiva la pausa entre requests.
    monkeypatch.chdir(tmp_path)
    for key in (
        "DAIA_TEST_BASE_URL",
        "DAIA_TEST_REGISTRY_URL",
        "DAIA_TEST_FAILURE_EXIT_CODE",
        "DAIA_TEST_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DAIA_TEST_REQUEST_DELAY_SECONDS", "0")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def run() -> TestRun:
    return TestRun()


@pytest.fixture
def make_client(settings) -> Callable[..., httpx.Client]:
    """Crea un cliente cuyas respuestas salen de un dict `url -> respuesta`.

    Valores admitidos: dict/list (JSON 200), str (texto 200), int (status sin
    body) o una excepción de httpx a lanzar.
    """

    def factory(routes: dict[str, object], seen: list[httpx.Request] | None = None) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            value = routes.get(str(request.url), 404)
            if isinstance(value, Exception):
                raise value
            if isinstance(value, int):
                return httpx.Response(value)
            if isinstance(value, str):
                return httpx.Response(200, text=value)
            return httpx.Response(200, text=json.dumps(value))

        return build_client(settings, transport=httpx.MockTransport(handler))

    return factory
