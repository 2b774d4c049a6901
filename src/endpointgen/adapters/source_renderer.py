"""Render del módulo Python con las tablas de endpoints.

Por qué está en adapters:
- Jinja2 es un detalle de infraestructura; el Core solo aporta el toolkit
  (naming, codec de variantes, emisores) y el `Resolver`.

Diseño:
- El esqueleto del módulo (constantes, accessors) vive en `templates/`.
- Los literales `Partition(...)` se construyen con funciones puras, una por
  capa (partición / región / servicio / endpoint), que devuelven texto.
- Cada renderer tiene su propio `Environment`: el toolkit no es estado global.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import indent
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from endpointgen.core.codegen.emitters import (
    boxed_bool_if_set,
    endpoint_is_set,
    quote_string,
    service_set,
    string_if_set,
    string_list_if_set,
)
from endpointgen.core.codegen.naming import (
    SymbolTable,
    list_partition_names,
    partition_const,
    partition_getter,
    partition_var_name,
    region_const,
    service_const,
    to_symbol,
)
from endpointgen.core.codegen.variants import default_key_literal, endpoint_key_literal
from endpointgen.core.domain.models import (
    CredentialScope,
    DefaultKey,
    Endpoint,
    EndpointKey,
    Partition,
    Region,
    Resolver,
    Service,
)
from endpointgen.core.errors import InvalidSymbolError, TemplateExecutionError
from endpointgen.core.options import CodeGenOptions


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
_MODULE_TEMPLATE = "endpoints.py.j2"

_INDENT = " " * 4

# Nombres que el encabezado del módulo generado ya enlaza.
HEADER_SYMBOLS = (
    "re",
    "BoxedBool",
    "CredentialScope",
    "DefaultKey",
    "Endpoint",
    "EndpointKey",
    "Partition",
    "Region",
    "Resolver",
    "Service",
    "Variant",
    "fipsVariant",
    "dualStackVariant",
    "boxedTrue",
    "boxedFalse",
    "DefaultResolver",
    "DefaultPartitions",
    "defaultPartitions",
)


def comment_text(value: str) -> str:
    """Colapsa a una línea el texto que termina en un comentario `#`.

    Descarta lo no imprimible (NUL, controles, surrogates sueltos): no compila
    o no se puede escribir como UTF-8.
    """

    text = " ".join(str(value).split())
    return "".join(ch for ch in text if ch.isprintable())


def docstring_text(value: str) -> str:
    return comment_text(value).replace("\\", "\\\\").replace('"', '\\"')


def _call(name: str, fields: Iterable[str]) -> str:
    body = "".join(fields)
    if not body:
        return f"{name}()"
    return f"{name}(\n{indent(body, _INDENT)})"


def _mapping(entries: Iterable[tuple[str, str]]) -> str:
    body = "".join(f"{key}: {value},\n" for key, value in entries)
    if not body:
        return "{}"
    return "{\n" + indent(body, _INDENT) + "}"


def render_credential_scope(scope: CredentialScope) -> str:
    return _call(
        "CredentialScope",
        [
            string_if_set("region={},\n", scope.region),
            string_if_set("service={},\n", scope.service),
        ],
    )


def render_endpoint(endpoint: Endpoint) -> str:
    if not endpoint_is_set(endpoint):
        return "Endpoint()"

    fields = [
        string_if_set("hostname={},\n", endpoint.hostname),
        string_if_set("dns_suffix={},\n", endpoint.dns_suffix),
        string_if_set("ssl_common_name={},\n", endpoint.ssl_common_name),
        string_list_if_set("protocols=[{}],\n", endpoint.protocols),
        string_list_if_set("signature_versions=[{}],\n", endpoint.signature_versions),
    ]
    scope = endpoint.credential_scope
    if scope.region or scope.service:
        fields.append(f"credential_scope={render_credential_scope(scope)},\n")
    fields.append(boxed_bool_if_set("deprecated={},\n", endpoint.deprecated))
    return _call("Endpoint", fields)


def render_defaults(defaults: dict[DefaultKey, Endpoint]) -> str:
    ordered = sorted(defaults.items(), key=lambda item: int(item[0].variant))
    return _mapping((default_key_literal(key), render_endpoint(endpoint)) for key, endpoint in ordered)


def render_endpoints(endpoints: dict[EndpointKey, Endpoint]) -> str:
    ordered = sorted(endpoints.items(), key=lambda item: (item[0].region, int(item[0].variant)))
    return _mapping((endpoint_key_literal(key), render_endpoint(endpoint)) for key, endpoint in ordered)


def render_service(service: Service) -> str:
    fields = [
        string_if_set("partition_endpoint={},\n", service.partition_endpoint),
        boxed_bool_if_set("is_regionalized={},\n", service.is_regionalized),
    ]
    if service.defaults:
        fields.append(f"defaults={render_defaults(service.defaults)},\n")
    if service.endpoints:
        fields.append(f"endpoints={render_endpoints(service.endpoints)},\n")
    return _call("Service", fields)


def render_services(services: dict[str, Service]) -> str:
    return _mapping((quote_string(service_id), render_service(s)) for service_id, s in sorted(services.items()))


def render_region(region: Region) -> str:
    return _call("Region", [string_if_set("description={},\n", region.description)])


def render_regions(regions: dict[str, Region]) -> str:
    return _mapping((quote_string(region_id), render_region(r)) for region_id, r in sorted(regions.items()))


def render_partition(partition: Partition) -> str:
    """Literal `Partition(...)` con todas sus regiones, servicios y endpoints."""

    fields = [
        string_if_set("id={},\n", partition.id),
        string_if_set("name={},\n", partition.name),
        string_if_set("dns_suffix={},\n", partition.dns_suffix),
    ]
    if partition.region_regex is not None:
        fields.append(f"region_regex=re.compile({quote_string(partition.region_regex.pattern)}),\n")
    if partition.defaults:
        fields.append(f"defaults={render_defaults(partition.defaults)},\n")
    fields.append(f"regions={render_regions(partition.regions)},\n")
    fields.append(f"services={render_services(partition.services)},\n")
    return _call("Partition", fields)


class EndpointsSourceRenderer:
    """Renders a `Resolver` into the source of a Python module."""

    def __init__(self, options: CodeGenOptions | None = None) -> None:
        self._options = options or CodeGenOptions()
        self._env = Environment(
            loader=FileSystemLoader(str(_TEMPLATES_DIR)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.globals.update(self._toolkit())

    def _toolkit(self) -> dict[str, Any]:
        return {
            "comment_text": comment_text,
            "docstring_text": docstring_text,
            "list_partition_names": list_partition_names,
            "partition_const": partition_const,
            "partition_getter": partition_getter,
            "partition_var_name": partition_var_name,
            "quote_string": quote_string,
            "region_symbol": self.region_symbol,
            "render_partition": render_partition,
            "service_const": service_const,
            "service_set": service_set,
            "sorted": sorted,
            "to_symbol": to_symbol,
        }

    def region_symbol(self, partition_id: str, region_id: str) -> str:
        return region_const(partition_id, region_id, namespaced=self._options.namespace_region_consts)

    def declare_symbols(self, resolver: Resolver) -> SymbolTable:
        """Registra todos los nombres de módulo; falla ante colisiones."""

        module = self._options.model_import
        if not all(part.isidentifier() for part in module.split(".")):
            raise InvalidSymbolError(module, "the model_import option")

        table = SymbolTable(reserved=HEADER_SYMBOLS)
        for partition in resolver:
            origin = f"partition {partition.id!r}"
            table.declare(partition_const(partition.id), origin)
            table.declare(partition_getter(partition.id), origin)
            table.declare(partition_var_name(partition.id), origin)
            for region_id in sorted(partition.regions):
                table.declare(
                    self.region_symbol(partition.id, region_id),
                    f"region {region_id!r} of partition {partition.id!r}",
                )

        if not self._options.disable_generate_service_ids:
            for service_id in sorted(service_set(resolver)):
                table.declare(service_const(service_id), f"service {service_id!r}")
        return table

    def render(self, resolver: Resolver) -> str:
        self.declare_symbols(resolver)
        try:
            template = self._env.get_template(_MODULE_TEMPLATE)
            text = template.render(resolver=resolver, options=self._options)
        except TemplateError as exc:
            raise TemplateExecutionError(f"failed to execute template, {exc}") from exc
        return text.rstrip("\n") + "\n"
