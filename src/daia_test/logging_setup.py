"""Configuración de logging.

Los logs van a stderr vía Rich para que stdout quede limpio para el
protocolo de líneas `ok` / `not ok`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from daia_test.core.config import LogLevel


def configure_logging(level: LogLevel = LogLevel.WARNING) -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
