"""Modelos del dominio.

Por qué Pydantic en el dominio:
- Validación estricta de los casos de prueba en el borde (CSV/CLI).
- Serialización directa del resultado de un run (exportación JSON).

Nota:
- `TestRun` es un dataclass mutable: es el contexto que cada chequeo recibe
  explícitamente para registrar aserciones, en vez de contadores globales.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel, Field, model_validator


class TestCase(BaseModel):
    """Un caso de disponibilidad: ISIL + PPN, o un identificador completo."""

    isil: str | None = Field(
        default=None,
        description="ISIL de la biblioteca (p.ej. 'DE-7').",
    )
    ppn: str | None = Field(
        default=None,
        description="PPN del registro en el catálogo.",
    )
    full_id: str | None = Field(
        default=None,
        description="Identificador compuesto consultado tal cual.",
    )

    @model_validator(mode="after")
    def _check_identifier(self) -> "TestCase":
        if not (self.has_isil_ppn or self.full_id):
            raise ValueError("a test case needs ISIL and PPN, or a full id")
        return self

    @property
    def has_isil_ppn(self) -> bool:
        return bool(self.isil and self.ppn)


class AssertionResult(BaseModel):
    """Resultado de una aserción individual (una línea del protocolo)."""

    number: int = Field(..., ge=1, description="Número de secuencia (1-based).")
    ok: bool = Field(..., description="Si la aserción pasó.")
    label: str = Field(..., description="Etiqueta legible (normalmente la URL consultada).")
    detail: str | None = Field(
        default=None,
        description="Diagnóstico opcional (error HTTP, motivo del fallo).",
    )


@dataclass
class TestRun:
    """Contadores y resultados de un run completo."""

    total: int = 0
    failed: int = 0
    results: list[AssertionResult] = field(default_factory=list)
    listener: Callable[[AssertionResult], None] | None = None

    @property
    def passed(self) -> bool:
        return self.failed == 0

    def record(self, ok: bool, label: str, detail: str | None = None) -> AssertionResult:
        self.total += 1
        if not ok:
            self.failed += 1
        result = AssertionResult(number=self.total, ok=ok, label=label, detail=detail)
        self.results.append(result)
        if self.listener is not None:
            self.listener(result)
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "failed": self.failed,
            "passed": self.passed,
            "results": [r.model_dump(mode="json") for r in self.results],
        }
