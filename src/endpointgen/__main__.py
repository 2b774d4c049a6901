"""Script de ejecución.

Permite ejecutar la CLI con `python -m endpointgen` además del script
`endpointgen` instalado por el paquete.
"""

from __future__ import annotations

from endpointgen.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
