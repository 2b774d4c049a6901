"""Codec de variantes de endpoint (FIPS / dual-stack)."""

from __future__ import annotations

from typing import Iterable

from endpointgen.core.codegen.emitters import quote_string
from endpointgen.core.domain.models import DefaultKey, EndpointKey, Variant
from endpointgen.core.errors import UnknownVariantError

# Orden canónico de emisión.
_VARIANT_SYMBOLS: tuple[tuple[Variant, str], ...] = (
    (Variant.FIPS, "fipsVariant"),
    (Variant.DUAL_STACK, "dualStackVariant"),
)

_ALL_VARIANTS = int(Variant.FIPS | Variant.DUAL_STACK)

_TAGS: dict[str, Variant] = {
    "fips": Variant.FIPS,
    "dualstack": Variant.DUAL_STACK,
}


def encode_variant(bits: int) -> str:
    """Render a variant bitmask as a bitwise-OR of symbolic flag names.

    >>> encode_variant(3)
    'fipsVariant|dualStackVariant'
    """

    bits = int(bits)
    if bits == 0:
        return "0"
    if bits < 0 or bits > _ALL_VARIANTS:
        raise UnknownVariantError(bits)

    return "|".join(symbol for flag, symbol in _VARIANT_SYMBOLS if bits & flag)


def decode_variant_tags(tags: Iterable[str]) -> int | None:
    """Traduce los tags del modelo a bitmask.

    Devuelve `None` si la lista está vacía o contiene un tag desconocido: el
    decoder descarta esa variante.
    """

    variant = 0
    seen = False
    for tag in tags:
        flag = _TAGS.get(tag.lower())
        if flag is None:
            return None
        variant |= int(flag)
        seen = True
    return variant if seen else None


def endpoint_key_literal(key: EndpointKey) -> str:
    args = [f"region={quote_string(key.region)}"]
    if key.variant:
        args.append(f"variant={encode_variant(key.variant)}")
    return f"EndpointKey({', '.join(args)})"


def default_key_literal(key: DefaultKey) -> str:
    if not key.variant:
        return "DefaultKey()"
    return f"DefaultKey(variant={encode_variant(key.variant)})"
