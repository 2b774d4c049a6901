from __future__ import annotations

import pytest

from endpointgen.core.codegen.emitters import (
    boxed_bool_if_set,
    endpoint_is_set,
    quote_string,
    service_set,
    string_if_set,
    string_list_if_set,
)
from endpointgen.core.codegen.variants import (
    decode_variant_tags,
    default_key_literal,
    encode_variant,
    endpoint_key_literal,
)
from endpointgen.core.domain.models import (
    BoxedBool,
    CredentialScope,
    DefaultKey,
    Endpoint,
    EndpointKey,
    Partition,
    Service,
    Variant,
)
from endpointgen.core.errors import UnknownVariantError


@pytest.mark.parametrize(
    ("bits", "expected"),
    [
        (0, "0"),
        (1, "fipsVariant"),
        (2, "dualStackVariant"),
        (3, "fipsVariant|dualStackVariant"),
        (Variant.FIPS | Variant.DUAL_STACK, "fipsVariant|dualStackVariant"),
    ],
)
def test_encode_variant(bits: int, expected: str) -> None:
    assert encode_variant(bits) == expected


@pytest.mark.parametrize("bits", [4, 5, 7, 8, 255, -1])
def test_encode_variant_rejects_unknown_bits(bits: int) -> None:
    with pytest.raises(UnknownVariantError) as exc_info:
        encode_variant(bits)

    assert exc_info.value.variant == bits


@pytest.mark.parametrize(
    ("tags", "expected"),
    [
        (["fips"], 1),
        (["dualstack"], 2),
        (["dualstack", "fips"], 3),
        (["FIPS", "DualStack"], 3),
        ([], None),
        (["fips", "ipv6"], None),
    ],
)
def test_decode_variant_tags(tags: list[str], expected: int | None) -> None:
    assert decode_variant_tags(tags) == expected


def test_key_literals() -> None:
    assert endpoint_key_literal(EndpointKey(region="us-east-1")) == 'EndpointKey(region="us-east-1")'
    assert (
        endpoint_key_literal(EndpointKey(region="us-west-2", variant=3))
        == 'EndpointKey(region="us-west-2", variant=fipsVariant|dualStackVariant)'
    )
    assert endpoint_key_literal(EndpointKey()) == 'EndpointKey(region="")'
    assert default_key_literal(DefaultKey()) == "DefaultKey()"
    assert default_key_literal(DefaultKey(variant=2)) == "DefaultKey(variant=dualStackVariant)"

    with pytest.raises(UnknownVariantError):
        default_key_literal(DefaultKey(variant=4))


def test_quote_string_escapes() -> None:
    assert quote_string("us-east-1") == '"us-east-1"'
    assert quote_string('a"b\\c\nd') == '"a\\"b\\\\c\\nd"'
    assert quote_string("{service}.{region}") == '"{service}.{region}"'
    assert eval(quote_string('tricky "\\ \t value')) == 'tricky "\\ \t value'


@pytest.mark.parametrize("value", ["a\x00b", "A\ud800", "caf\u00e9", "\u2028x"])
def test_quote_string_is_ascii(value: str) -> None:
    literal = quote_string(value)

    assert literal.isascii()
    assert "\x00" not in literal
    assert eval(literal) == value


def test_string_if_set() -> None:
    assert string_if_set("hostname={},\n", "") == ""
    assert string_if_set("hostname={},\n", "ec2.amazonaws.com") == 'hostname="ec2.amazonaws.com",\n'


def test_string_list_if_set() -> None:
    assert string_list_if_set("protocols=[{}],\n", []) == ""
    assert string_list_if_set("protocols=[{}],\n", ["http", "https"]) == 'protocols=["http", "https"],\n'


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (BoxedBool.UNSET, ""),
        (BoxedBool.TRUE, "deprecated=boxedTrue,\n"),
        (BoxedBool.FALSE, "deprecated=boxedFalse,\n"),
    ],
)
def test_boxed_bool_if_set(value: BoxedBool, expected: str) -> None:
    assert boxed_bool_if_set("deprecated={},\n", value) == expected


def test_boxed_bool_from_optional() -> None:
    assert BoxedBool.from_optional(None) is BoxedBool.UNSET
    assert BoxedBool.from_optional(True) is BoxedBool.TRUE
    assert BoxedBool.from_optional(False) is BoxedBool.FALSE


@pytest.mark.parametrize(
    "endpoint",
    [
        Endpoint(hostname="x"),
        Endpoint(dns_suffix="api.aws"),
        Endpoint(ssl_common_name="x"),
        Endpoint(protocols=["https"]),
        Endpoint(signature_versions=["v4"]),
        Endpoint(credential_scope=CredentialScope(region="us-east-1")),
        Endpoint(credential_scope=CredentialScope(service="s3")),
        Endpoint(deprecated=BoxedBool.FALSE),
    ],
)
def test_endpoint_is_set(endpoint: Endpoint) -> None:
    assert endpoint_is_set(endpoint)


def test_endpoint_is_not_set() -> None:
    assert not endpoint_is_set(Endpoint())
    assert not endpoint_is_set(Endpoint(protocols=[], credential_scope=CredentialScope()))


def test_merge_in_prefers_fields_set_on_other() -> None:
    base = Endpoint(
        hostname="a",
        protocols=["https"],
        credential_scope=CredentialScope(region="us-east-1", service="s3"),
        deprecated=BoxedBool.TRUE,
    )
    merged = base.merge_in(Endpoint(hostname="b", credential_scope=CredentialScope(service="iam")))

    assert merged.hostname == "b"
    assert merged.protocols == ["https"]
    assert merged.credential_scope == CredentialScope(region="us-east-1", service="iam")
    assert merged.deprecated is BoxedBool.TRUE
    assert base.hostname == "a"


def test_service_set_dedupes_across_partitions() -> None:
    partitions = [
        Partition(id="aws", services={"ec2": Service(), "s3": Service()}),
        Partition(id="aws-cn", services={"ec2": Service()}),
        Partition(id="empty"),
    ]

    assert service_set(partitions) == {"ec2", "s3"}
    assert service_set([]) == set()
