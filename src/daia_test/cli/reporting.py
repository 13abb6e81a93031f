"""Formato de salida (protocolo de líneas estilo TAP).

Por qué separar:
- Evita mezclar lógica de comandos con detalles de presentación.
- Las funciones de formato son puras y fáciles de testear.
"""

from __future__ import annotations

from typing import Callable

from daia_test.core.domain.models import AssertionResult, TestRun


def format_result(result: AssertionResult) -> str:
    status = "ok" if result.ok else "not ok"
    return f"{status} {result.number} - {result.label}"


def format_plan(run: TestRun) -> str:
    if run.failed:
        return f"1..{run.total} # failed {run.failed}"
    return f"1..{run.total} # all passed"


def make_listener(
    write: Callable[[str], None],
    *,
    tap: bool,
) -> Callable[[AssertionResult], None]:
    """Listener para `TestRun`: en modo TAP escribe todo, si no solo fallos."""

    def listener(result: AssertionResult) -> None:
        if result.ok and not tap:
            return
        write(format_result(result))
        if tap and result.detail:
            write(f"# {result.detail}")

    return listener
