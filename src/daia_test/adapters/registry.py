"""Chequeo de cobertura contra el registro de bases de datos.

El registro es un documento JSON-LD cuyo `subjectOf` enumera las bases de
datos conocidas. Las URLs `.../opac-de-<x>` corresponden a la ISIL
`DE-<x>` con la primera letra en mayúscula (convención del registro GBV).
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable

import httpx

from daia_test.adapters.http_client import fetch
from daia_test.core.domain.models import TestCase, TestRun

logger = logging.getLogger(__name__)

_OPAC_URL = re.compile(r"/opac-de-([^/?#]+)$")


def isil_from_url(url: str) -> str | None:
    match = _OPAC_URL.search(url)
    if not match:
        return None
    suffix = match.group(1)
    return "DE-" + suffix[:1].upper() + suffix[1:]


def _entry_url(entry: Any) -> str | None:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        for key in ("@id", "id", "url"):
            value = entry.get(key)
            if isinstance(value, str):
                return value
    return None


def extract_isils(payload: Any) -> set[str]:
    if not isinstance(payload, dict):
        return set()
    entries = payload.get("subjectOf")
    if isinstance(entries, (str, dict)):
        entries = [entries]
    if not isinstance(entries, list):
        return set()

    isils: set[str] = set()
    for entry in entries:
        url = _entry_url(entry)
        if url is None:
            continue
        isil = isil_from_url(url)
        if isil:
            isils.add(isil)
    return isils


def load_registry(client: httpx.Client, registry_url: str, run: TestRun) -> set[str]:
    body = fetch(client, registry_url, run)
    if body is None:
        return set()
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        logger.warning("registry %s is not valid JSON: %s", registry_url, exc)
        return set()
    isils = extract_isils(payload)
    logger.info("registry lists %d databases", len(isils))
    return isils


def check_coverage(
    client: httpx.Client,
    registry_url: str,
    cases: Iterable[TestCase],
    run: TestRun,
) -> set[str]:
    """Registra una aserción por ISIL cubierta y un fallo por cada ISIL sin caso.

    Devuelve el conjunto de ISILs no cubiertas.
    """

    expected = load_registry(client, registry_url, run)
    for case in cases:
        if case.isil and case.isil in expected:
            expected.discard(case.isil)
            run.record(True, f"{case.isil} covered")

    for isil in sorted(expected):
        run.record(False, f"{isil} not covered by any test case")
    return expected
