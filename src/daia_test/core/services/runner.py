"""Orquestación de un run de validación.

Este módulo concentra el flujo (caso directo, batch desde CSV, cobertura)
para que la CLI solo se ocupe de argumentos, salida y códigos de salida.
Todo es secuencial: una request en vuelo a la vez.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

import httpx

from daia_test.adapters.daia import check_availability
from daia_test.adapters.registry import check_coverage
from daia_test.adapters.case_source import load_test_cases
from daia_test.core.domain.models import TestCase, TestRun

logger = logging.getLogger(__name__)


@dataclass
class RunRequest:
    """Parámetros que controlan un run."""

    base_url: str
    registry_url: str
    source: str | None = None
    case: TestCase | None = None
    coverage: bool = False
    delay: float = 0.2


def run_checks(
    request: RunRequest,
    client: httpx.Client,
    run: TestRun,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> TestRun:
    if request.coverage:
        if request.source is None:
            raise ValueError("coverage mode needs a test case source")
        cases = load_test_cases(request.source, client, run)
        check_coverage(client, request.registry_url, cases, run)
        return run

    if request.case is not None:
        check_availability(client, request.base_url, request.case, run)
        return run

    if request.source is None:
        raise ValueError("nothing to check: give a test case or a source")

    for index, case in enumerate(load_test_cases(request.source, client, run)):
        if index and request.delay > 0:
            sleep(request.delay)
        check_availability(client, request.base_url, case, run)

    logger.info("%d assertions, %d failed", run.total, run.failed)
    return run
