"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El decoder valida el documento de entrada contra estos tipos y el módulo
  generado reconstruye exactamente los mismos objetos.
- La igualdad estructural (`==`) de Pydantic es profunda, lo que permite
  comparar un `Endpoint` contra su valor cero sin código adicional.

Nota:
- Estos modelos describen *qué* contiene el modelo de endpoints, no *cómo* se
  resuelve un endpoint en runtime.
"""

from __future__ import annotations

import re
from enum import Enum, IntFlag
from typing import Iterator

from pydantic import BaseModel, Field, RootModel
from pydantic.config import ConfigDict


class Variant(IntFlag):
    """Flags de variante de un endpoint (bitmask de 2 bits)."""

    FIPS = 1
    DUAL_STACK = 2


class BoxedBool(str, Enum):
    """Booleano tri-estado: sin valor, verdadero o falso.

    `UNSET` significa "heredar del default", que no es lo mismo que `FALSE`.
    """

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_optional(cls, value: bool | None) -> "BoxedBool":
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE


class CredentialScope(BaseModel):
    region: str = ""
    service: str = ""


class Endpoint(BaseModel):
    """Destino concreto (hostname, protocolos, credential scope)."""

    hostname: str = Field(default="", description="Template de hostname, p.ej. '{service}.{region}.{dnsSuffix}'.")
    dns_suffix: str = ""
    ssl_common_name: str = ""
    protocols: list[str] = Field(default_factory=list)
    signature_versions: list[str] = Field(default_factory=list)
    credential_scope: CredentialScope = Field(default_factory=CredentialScope)
    deprecated: BoxedBool = BoxedBool.UNSET

    def merge_in(self, other: Endpoint) -> Endpoint:
        """Devuelve una copia donde cada campo presente en `other` gana."""

        update: dict[str, object] = {}
        if other.hostname:
            update["hostname"] = other.hostname
        if other.protocols:
            update["protocols"] = list(other.protocols)
        if other.signature_versions:
            update["signature_versions"] = list(other.signature_versions)

        scope = self.credential_scope
        if other.credential_scope.region:
            scope = scope.model_copy(update={"region": other.credential_scope.region})
        if other.credential_scope.service:
            scope = scope.model_copy(update={"service": other.credential_scope.service})
        update["credential_scope"] = scope

        if other.ssl_common_name:
            update["ssl_common_name"] = other.ssl_common_name
        if other.deprecated is not BoxedBool.UNSET:
            update["deprecated"] = other.deprecated
        if other.dns_suffix:
            update["dns_suffix"] = other.dns_suffix
        return self.model_copy(update=update)


class EndpointKey(BaseModel):
    """Clave compuesta región + bitmask de variante."""

    model_config = ConfigDict(frozen=True)

    region: str = ""
    variant: int = Field(default=0, description="Bitmask de `Variant`; otros bits son inválidos.")


class DefaultKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    variant: int = 0


class Region(BaseModel):
    description: str = ""


class Service(BaseModel):
    partition_endpoint: str = ""
    is_regionalized: BoxedBool = BoxedBool.UNSET
    defaults: dict[DefaultKey, Endpoint] = Field(default_factory=dict)
    endpoints: dict[EndpointKey, Endpoint] = Field(default_factory=dict)


class Partition(BaseModel):
    """Agrupación de regiones y servicios con convenciones de naming comunes."""

    id: str = Field(default="", description="Identificador, p.ej. 'aws', 'aws-cn'.")
    name: str = Field(default="", description="Nombre para mostrar, p.ej. 'AWS Standard'.")
    dns_suffix: str = ""
    region_regex: re.Pattern[str] | None = None
    defaults: dict[DefaultKey, Endpoint] = Field(default_factory=dict)
    regions: dict[str, Region] = Field(default_factory=dict)
    services: dict[str, Service] = Field(default_factory=dict)


class Resolver(RootModel[list[Partition]]):
    """Modelo completo: secuencia ordenada de particiones."""

    root: list[Partition] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Partition]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Partition:
        return self.root[index]

    def partitions(self) -> list[Partition]:
        return list(self.root)
