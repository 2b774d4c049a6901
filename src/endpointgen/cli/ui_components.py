"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from rich.table import Table

from endpointgen.core.codegen.naming import partition_const, partition_getter
from endpointgen.core.domain.models import Resolver


def build_partitions_table(resolver: Resolver) -> Table:
    """Tabla con una fila por partición del modelo decodificado."""

    table = Table(title="Endpoint Partitions")
    table.add_column("Partition", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("DNS suffix", style="dim")
    table.add_column("Regions", justify="right", style="green")
    table.add_column("Services", justify="right", style="green")
    table.add_column("Symbols", style="magenta")

    for partition in resolver:
        table.add_row(
            partition.id,
            partition.name,
            partition.dns_suffix,
            str(len(partition.regions)),
            str(len(partition.services)),
            f"{partition_const(partition.id)}, {partition_getter(partition.id)}()",
        )
    return table
