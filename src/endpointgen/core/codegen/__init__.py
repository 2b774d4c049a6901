"""Toolkit de generación: naming, codec de variantes y emisores.

Por qué un paquete aparte:
- Son funciones puras sin estado de proceso; el renderer las registra en su
  propio `jinja2.Environment` y los tests las ejercitan sin templates.
"""

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
    region_const_name,
    service_const,
    to_symbol,
)
from endpointgen.core.codegen.variants import (
    decode_variant_tags,
    default_key_literal,
    encode_variant,
    endpoint_key_literal,
)

__all__ = [
	"SymbolTable",
	"boxed_bool_if_set",
	"decode_variant_tags",
	"default_key_literal",
	"encode_variant",
	"endpoint_is_set",
	"endpoint_key_literal",
	"list_partition_names",
	"partition_const",
	"partition_getter",
	"partition_var_name",
	"quote_string",
	"region_const",
	"region_const_name",
	"service_const",
	"service_set",
	"string_if_set",
	"string_list_if_set",
	"to_symbol",
]
