"""Chequeo de disponibilidad contra un servidor DAIA.

Una respuesta pasa si el primer item del primer documento está marcado
explícitamente como `available` o `unavailable`.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from daia_test.adapters.http_client import fetch
from daia_test.core.domain.models import AssertionResult, TestCase, TestRun

logger = logging.getLogger(__name__)


def build_query_url(base_url: str, case: TestCase) -> str:
    if case.has_isil_ppn:
        isil = quote(case.isil or "", safe="")
        ppn = quote(case.ppn or "", safe="")
        return f"{base_url}isil/{isil}?id=ppn:{ppn}&format=json"
    return f"{base_url}?id={quote(case.full_id or '', safe=':/')}&format=json"


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def first_item(payload: Any) -> dict[str, Any]:
    """Navega `document[0].item[0]`; cualquier forma inesperada da `{}`."""

    if not isinstance(payload, dict):
        return {}
    document = _first(payload.get("document"))
    if not isinstance(document, dict):
        return {}
    item = _first(document.get("item"))
    return item if isinstance(item, dict) else {}


def decode_json(body: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        logger.debug("invalid JSON: %s", exc)
        return {}


def is_decided(item: dict[str, Any]) -> bool:
    return bool(item.get("available")) or bool(item.get("unavailable"))


def check_availability(
    client: httpx.Client,
    base_url: str,
    case: TestCase,
    run: TestRun,
) -> AssertionResult | None:
    """Consulta un caso y registra pass/fail. Devuelve `None` si falló el fetch."""

    url = build_query_url(base_url, case)
    body = fetch(client, url, run)
    if body is None:
        return None

    item = first_item(decode_json(body))
    if is_decided(item):
        return run.record(True, url)
    return run.record(False, url, detail="no item flagged available or unavailable")
