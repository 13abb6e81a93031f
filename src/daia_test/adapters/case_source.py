"""Ingesta de casos de prueba (CSV local o remoto).

Formato:
- Primera línea: cabecera (siempre se descarta).
- Resto: `ISIL PPN` separados por espacios, comas o punto y coma.
  Una línea con un único campo se toma como identificador completo.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

import httpx

from daia_test.adapters.http_client import fetch
from daia_test.core.domain.models import TestCase, TestRun

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = re.compile(r"[\s,;]+")


class InputSourceError(Exception):
    """La fuente de casos no existe o no se puede leer (error fatal)."""


def parse_test_cases(text: str) -> Iterator[TestCase]:
    lines = text.splitlines()
    for lineno, line in enumerate(lines[1:], start=2):
        fields = [f for f in _FIELD_SEPARATOR.split(line.strip()) if f]
        if not fields:
            continue
        if len(fields) == 1:
            yield TestCase(full_id=fields[0])
            continue
        if len(fields) > 2:
            logger.debug("line %d: ignoring extra fields %r", lineno, fields[2:])
        yield TestCase(isil=fields[0], ppn=fields[1])


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str, client: httpx.Client, run: TestRun) -> str | None:
    """Lee el texto de casos desde un path local o una URL.

    Reglas:
    - Si existe un fichero local con ese nombre, gana.
    - Si no, una URL http(s) se descarga (un fallo cuenta como aserción fallida).
    - Cualquier otra cosa es fatal.
    """

    path = Path(source)
    if path.is_file():
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputSourceError(f"cannot read {source}: {exc}") from exc

    if is_remote(source):
        return fetch(client, source, run)

    raise InputSourceError(f"no such file: {source}")


def load_test_cases(source: str, client: httpx.Client, run: TestRun) -> Iterator[TestCase]:
    text = read_source(source, client, run)
    if text is None:
        return iter(())
    return parse_test_cases(text)
