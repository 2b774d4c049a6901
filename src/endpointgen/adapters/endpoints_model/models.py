"""Modelos del documento `endpoints.json` (formato v3).

Idea:
- Describen la forma del JSON tal cual (camelCase vía alias); el loader los
  convierte luego a los tipos del dominio.
- Campos desconocidos se ignoran, igual que hace el SDK con modelos nuevos.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CredentialScopeDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    region: str = ""
    service: str = ""


class EndpointDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    hostname: str = ""
    dns_suffix: str = Field(default="", alias="dnsSuffix")
    ssl_common_name: str = Field(default="", alias="sslCommonName")
    protocols: list[str] = Field(default_factory=list)
    signature_versions: list[str] = Field(default_factory=list, alias="signatureVersions")
    credential_scope: CredentialScopeDocument = Field(
        default_factory=CredentialScopeDocument,
        alias="credentialScope",
    )
    deprecated: bool | None = None


class EndpointVariantDocument(EndpointDocument):
    tags: list[str] = Field(default_factory=list)


class EndpointWithVariantsDocument(EndpointDocument):
    variants: list[EndpointVariantDocument] = Field(default_factory=list)


class RegionDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""


class ServiceDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    partition_endpoint: str = Field(default="", alias="partitionEndpoint")
    is_regionalized: bool | None = Field(default=None, alias="isRegionalized")
    defaults: EndpointWithVariantsDocument | None = None
    endpoints: dict[str, EndpointWithVariantsDocument] = Field(default_factory=dict)


class PartitionDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    partition: str = ""
    partition_name: str = Field(default="", alias="partitionName")
    dns_suffix: str = Field(default="", alias="dnsSuffix")
    region_regex: str | None = Field(default=None, alias="regionRegex")
    defaults: EndpointWithVariantsDocument | None = None
    regions: dict[str, RegionDocument] = Field(default_factory=dict)
    services: dict[str, ServiceDocument] = Field(default_factory=dict)
