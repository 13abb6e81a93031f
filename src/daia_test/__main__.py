"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m daia_test` durante desarrollo.
- Mantiene un entrypoint simple además del script declarado en pyproject.
"""

from __future__ import annotations

from daia_test.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
