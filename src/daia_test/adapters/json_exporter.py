"""Exportación JSON de un run.

Por qué JSON:
- Interoperabilidad con CI y otras herramientas (dashboards, diffs entre runs).
"""

from __future__ import annotations

import json
from pathlib import Path

from daia_test.core.domain.models import TestRun


def export_run_json(*, run: TestRun, output_path: Path) -> Path:
    """Exporta `TestRun` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(run.to_dict(), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
