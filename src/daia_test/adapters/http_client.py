"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers (User-Agent identificable, sin caché).
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from daia_test.core.config import AppSettings
from daia_test.core.domain.models import TestRun

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults del validador.

    Por qué síncrono:
    - Las consultas van estrictamente en secuencia, una a la vez.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Cache-Control": "no-cache",
        "Accept": "application/json, application/ld+json;q=0.9, */*;q=0.5",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def fetch(client: httpx.Client, url: str, run: TestRun) -> str | None:
    """GET de `url`; devuelve el body o registra una aserción fallida.

    Errores de red y status no-2xx cuentan como un único fallo y el run
    continúa con el siguiente caso.
    """

    logger.debug("GET %s", url)
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        logger.info("request failed for %s: %s", url, exc)
        run.record(False, url, detail=f"request failed: {exc}")
        return None

    if not response.is_success:
        logger.info("HTTP %s for %s", response.status_code, url)
        run.record(False, url, detail=f"HTTP {response.status_code}")
        return None

    return response.text
