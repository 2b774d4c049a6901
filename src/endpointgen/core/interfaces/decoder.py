"""Contrato del decoder de modelos.

Por qué Protocol:
- El decoder es un colaborador externo: el pipeline solo consume su salida
  (`Resolver`) y le reenvía las opciones sin examinarlas.
- Permite sustituir el decoder JSON por otro (o por un stub en tests) sin
  herencia rígida.
"""

from __future__ import annotations

from typing import IO, Protocol, runtime_checkable

from endpointgen.core.domain.models import Resolver
from endpointgen.core.options import DecodeModelOptions


@runtime_checkable
class ModelDecoder(Protocol):
    """Contrato mínimo para decodificar un documento de endpoints."""

    def decode(self, model_file: IO[str] | IO[bytes], options: DecodeModelOptions) -> Resolver:
        """Lee `model_file` completo y devuelve el modelo decodificado."""

        ...
