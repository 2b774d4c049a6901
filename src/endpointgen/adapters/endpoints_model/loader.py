"""Decoder del modelo de endpoints (JSON v3).

Soporta el formato publicado por los SDKs:
- {"version": 3, "partitions": [...]}

Las entradas con `variants` se expanden a una clave por variante; las
variantes con tags desconocidos se descartan.
"""

from __future__ import annotations

import json
import logging
import re
from typing import IO, Iterator

from pydantic import TypeAdapter, ValidationError

from endpointgen.adapters.endpoints_model.customizations import apply_customizations
from endpointgen.adapters.endpoints_model.models import (
    EndpointDocument,
    EndpointWithVariantsDocument,
    PartitionDocument,
    ServiceDocument,
)
from endpointgen.core.codegen.variants import decode_variant_tags
from endpointgen.core.domain.models import (
    BoxedBool,
    CredentialScope,
    DefaultKey,
    Endpoint,
    EndpointKey,
    Partition,
    Region,
    Resolver,
    Service,
)
from endpointgen.core.errors import DecodeModelError
from endpointgen.core.options import DecodeModelOptions

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 3

_PARTITIONS = TypeAdapter(list[PartitionDocument])


def decode_model(
    model_file: IO[str] | IO[bytes],
    options: DecodeModelOptions | None = None,
) -> Resolver:
    """Lee el documento completo y devuelve el `Resolver` decodificado."""

    options = options or DecodeModelOptions()

    try:
        data = json.loads(model_file.read())
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeModelError("failed to decode endpoints model", exc) from exc

    if not isinstance(data, dict) or data.get("version") != SUPPORTED_VERSION:
        raise DecodeModelError("endpoints version not found in model")
    if data.get("partitions") is None:
        raise DecodeModelError("endpoints model missing partitions")

    try:
        documents = _PARTITIONS.validate_python(data["partitions"])
    except ValidationError as exc:
        raise DecodeModelError("failed to decode endpoints model", exc) from exc

    partitions = [_to_partition(doc) for doc in documents]
    logger.debug("decoded %d partitions", len(partitions))

    if not options.skip_customizations:
        for partition in partitions:
            apply_customizations(partition)

    return Resolver(partitions)


class JsonModelDecoder:
    """`ModelDecoder` por defecto del pipeline."""

    def decode(self, model_file: IO[str] | IO[bytes], options: DecodeModelOptions) -> Resolver:
        return decode_model(model_file, options)


def _to_partition(doc: PartitionDocument) -> Partition:
    region_regex = None
    if doc.region_regex is not None:
        try:
            region_regex = re.compile(doc.region_regex)
        except re.error as exc:
            raise DecodeModelError(f"invalid region regex for partition {doc.partition!r}", exc) from exc

    return Partition(
        id=doc.partition,
        name=doc.partition_name,
        dns_suffix=doc.dns_suffix,
        region_regex=region_regex,
        defaults=_to_defaults(doc.defaults),
        regions={region_id: Region(description=r.description) for region_id, r in doc.regions.items()},
        services={service_id: _to_service(s) for service_id, s in doc.services.items()},
    )


def _to_service(doc: ServiceDocument) -> Service:
    endpoints: dict[EndpointKey, Endpoint] = {}
    for region_id, endpoint_doc in doc.endpoints.items():
        for variant, endpoint in _expand_variants(endpoint_doc):
            endpoints[EndpointKey(region=region_id, variant=variant)] = endpoint

    return Service(
        partition_endpoint=doc.partition_endpoint,
        is_regionalized=BoxedBool.from_optional(doc.is_regionalized),
        defaults=_to_defaults(doc.defaults),
        endpoints=endpoints,
    )


def _to_defaults(doc: EndpointWithVariantsDocument | None) -> dict[DefaultKey, Endpoint]:
    if doc is None:
        return {}
    return {DefaultKey(variant=variant): endpoint for variant, endpoint in _expand_variants(doc)}


def _expand_variants(doc: EndpointWithVariantsDocument) -> Iterator[tuple[int, Endpoint]]:
    base = _to_endpoint(doc)
    yield 0, base

    # Hostname y DNS suffix no se heredan: cada variante define los suyos.
    inherited = base.model_copy(update={"hostname": "", "dns_suffix": ""}, deep=True)
    for variant_doc in doc.variants:
        variant = decode_variant_tags(variant_doc.tags)
        if variant is None:
            logger.debug("skipping endpoint variant with tags %s", variant_doc.tags)
            continue
        yield variant, inherited.merge_in(_to_endpoint(variant_doc))


def _to_endpoint(doc: EndpointDocument) -> Endpoint:
    return Endpoint(
        hostname=doc.hostname,
        dns_suffix=doc.dns_suffix,
        ssl_common_name=doc.ssl_common_name,
        protocols=list(doc.protocols),
        signature_versions=list(doc.signature_versions),
        credential_scope=CredentialScope(
            region=doc.credential_scope.region,
            service=doc.credential_scope.service,
        ),
        deprecated=BoxedBool.from_optional(doc.deprecated),
    )
