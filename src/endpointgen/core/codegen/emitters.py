"""Emisores de campos opcionales.

Regla común: un valor cero/vacío/ausente no produce texto; cualquier otro
valor produce el fragmento formateado. Así el literal generado solo contiene
lo que difiere del default del modelo.
"""

from __future__ import annotations

import json
from typing import Iterable, Sequence

from endpointgen.core.domain.models import BoxedBool, Endpoint, Partition

_BOXED_SYMBOLS: dict[BoxedBool, str] = {
    BoxedBool.TRUE: "boxedTrue",
    BoxedBool.FALSE: "boxedFalse",
}


def quote_string(value: str) -> str:
    """Literal de string Python entre comillas dobles, siempre ASCII.

    Controles, NUL y surrogates sueltos salen como escapes `\\uXXXX`.
    """

    # Los escapes de JSON son un subconjunto de los de Python.
    return json.dumps(value, ensure_ascii=True)


def string_if_set(template: str, value: str) -> str:
    """Render `template` with the quoted value, or nothing when empty.

    >>> string_if_set("hostname={},", "s3.amazonaws.com")
    'hostname="s3.amazonaws.com",'
    """

    if not value:
        return ""
    return template.format(quote_string(value))


def string_list_if_set(template: str, values: Sequence[str]) -> str:
    if not values:
        return ""
    return template.format(", ".join(quote_string(v) for v in values))


def boxed_bool_if_set(template: str, value: BoxedBool) -> str:
    symbol = _BOXED_SYMBOLS.get(value)
    if symbol is None:
        return ""
    return template.format(symbol)


def endpoint_is_set(endpoint: Endpoint) -> bool:
    """True unless every field of `endpoint` equals its zero value."""

    return endpoint != Endpoint()


def service_set(partitions: Iterable[Partition]) -> set[str]:
    """Unión deduplicada de los ids de servicio de todas las particiones."""

    return {service_id for partition in partitions for service_id in partition.services}
