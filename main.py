"""Entry point de desarrollo (sin instalar el paquete).

Permite ejecutar la CLI con:
- `python -m main [--debug]` desde la raíz del monorepo de herramientas.

Motivo:
- El código vive en `src/` (`cli`, `core`, `adapters`); sin `pip install -e .`
  Python no los encuentra, así que se añade `src/` al `sys.path`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
