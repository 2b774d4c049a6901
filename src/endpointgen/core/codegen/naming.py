"""Síntesis de símbolos para el código generado.

Todas las funciones son puras: mismo input, mismo símbolo. No hay tabla global
de helpers; el renderer importa lo que necesita.

Política de colisiones:
- `to_symbol` no detecta colisiones por sí mismo (p.ej. "api.ecr" y "api-ecr"
  producen "ApiEcr").
- `SymbolTable` registra cada nombre de módulo antes de renderizar y falla con
  `SymbolCollisionError` en vez de emitir una declaración duplicada.
"""

from __future__ import annotations

import keyword
from typing import Iterable, Sequence

from endpointgen.core.domain.models import Partition
from endpointgen.core.errors import InvalidSymbolError, SymbolCollisionError


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _continues_word(ch: str) -> bool:
    # "_" no separa palabras, igual que en strings.Title de Go.
    return _is_word_char(ch) or ch == "_"


def _title(value: str) -> str:
    # La primera runa conservada siempre va en mayúscula: mantiene la idempotencia
    # cuando el id empieza por "_".
    out: list[str] = []
    prev = " "
    started = False
    for ch in value:
        if ch.isascii() and (not started or not _continues_word(prev)):
            ch = ch.upper()
        out.append(ch)
        started = started or _is_word_char(ch)
        prev = ch
    return "".join(out)


def to_symbol(raw: str) -> str:
    """Title-case `raw` and keep only ASCII letters and digits.

    >>> to_symbol("us-east-1")
    'UsEast1'
    >>> to_symbol("api.ecr")
    'ApiEcr'
    """

    return "".join(ch for ch in _title(raw) if _is_word_char(ch))


def region_const_name(partition_id: str, region_id: str) -> str:
    return to_symbol(partition_id) + to_symbol(region_id)


def partition_getter(partition_id: str) -> str:
    return f"{to_symbol(partition_id)}Partition"


def partition_var_name(partition_id: str) -> str:
    return partition_getter(partition_id).lower()


def partition_const(partition_id: str) -> str:
    return f"{to_symbol(partition_id)}PartitionID"


def region_const(partition_id: str, region_id: str, *, namespaced: bool = False) -> str:
    if namespaced:
        return f"{region_const_name(partition_id, region_id)}RegionID"
    return f"{to_symbol(region_id)}RegionID"


def service_const(service_id: str) -> str:
    return f"{to_symbol(service_id)}ServiceID"


def list_partition_names(partitions: Sequence[Partition | str]) -> str:
    """Lista en inglés de los nombres: "A", "A and B", "A, B, and C"."""

    names = [p if isinstance(p, str) else p.name for p in partitions]
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join([*names[:-1], f"and {names[-1]}"])


class SymbolTable:
    """Registro de los nombres de nivel de módulo del código generado."""

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._origins: dict[str, str] = {name: "the module header" for name in reserved}

    def declare(self, symbol: str, origin: str) -> str:
        if not symbol.isidentifier() or keyword.iskeyword(symbol):
            raise InvalidSymbolError(symbol, origin)

        existing = self._origins.get(symbol)
        if existing is not None:
            raise SymbolCollisionError(symbol, existing, origin)

        self._origins[symbol] = origin
        return symbol

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._origins

    def __len__(self) -> int:
        return len(self._origins)
