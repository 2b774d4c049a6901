from __future__ import annotations

import re

import pytest

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
from endpointgen.core.errors import InvalidSymbolError, SymbolCollisionError

_SYMBOL_RE = re.compile(r"^[A-Za-z0-9]*$")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("aws", "Aws"),
        ("aws-cn", "AwsCn"),
        ("us-east-1", "UsEast1"),
        ("api.ecr", "ApiEcr"),
        ("data.iot", "DataIot"),
        ("execute-api", "ExecuteApi"),
        ("runtime.sagemaker", "RuntimeSagemaker"),
        ("iotWireless", "IotWireless"),
        ("snake_case", "Snakecase"),
        ("api_gateway-v2", "ApigatewayV2"),
        ("_private", "Private"),
        ("__a_b", "Ab"),
        ("1abc", "1abc"),
        ("", ""),
        ("-.-", ""),
    ],
)
def test_to_symbol(raw: str, expected: str) -> None:
    assert to_symbol(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "---",
        "us-gov-west-1",
        "fips-us-east-1",
        "a b\tc",
        "ünïcode-nämé",
        "ß-x",
        "x/y:z@w",
        "UsEast1",
        "_a",
        "-_x_y",
        "snake_case",
    ],
)
def test_to_symbol_is_idempotent_and_alphanumeric(raw: str) -> None:
    symbol = to_symbol(raw)

    assert _SYMBOL_RE.match(symbol)
    assert to_symbol(symbol) == symbol


def test_derived_names() -> None:
    assert region_const_name("aws-us-gov", "us-gov-west-1") == "AwsUsGovUsGovWest1"
    assert partition_getter("aws-cn") == "AwsCnPartition"
    assert partition_var_name("aws-cn") == "awscnpartition"
    assert partition_const("aws") == "AwsPartitionID"
    assert service_const("ec2") == "Ec2ServiceID"
    assert region_const("aws", "us-east-1") == "UsEast1RegionID"
    assert region_const("aws", "us-east-1", namespaced=True) == "AwsUsEast1RegionID"


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        ([], ""),
        (["aws"], "aws"),
        (["aws", "aws-cn"], "aws and aws-cn"),
        (["aws", "aws-cn", "aws-iso"], "aws, aws-cn, and aws-iso"),
        (["a", "b", "c", "d"], "a, b, c, and d"),
    ],
)
def test_list_partition_names(names: list[str], expected: str) -> None:
    assert list_partition_names(names) == expected


def test_list_partition_names_uses_display_names(resolver) -> None:
    assert list_partition_names(resolver) == "AWS Standard, AWS China, and AWS GovCloud (US)"


def test_symbol_table_rejects_collisions() -> None:
    table = SymbolTable(reserved=["Endpoint"])
    table.declare(service_const("api.ecr"), "service 'api.ecr'")

    with pytest.raises(SymbolCollisionError) as exc_info:
        table.declare(service_const("api-ecr"), "service 'api-ecr'")

    assert exc_info.value.symbol == "ApiEcrServiceID"
    assert exc_info.value.first == "service 'api.ecr'"

    with pytest.raises(SymbolCollisionError):
        table.declare("Endpoint", "partition 'endpoint'")


@pytest.mark.parametrize("symbol", ["1stPartitionID", "", "class", "None"])
def test_symbol_table_rejects_invalid_identifiers(symbol: str) -> None:
    with pytest.raises(InvalidSymbolError):
        SymbolTable().declare(symbol, "test")


def test_symbol_table_tracks_declarations() -> None:
    table = SymbolTable(reserved=["re"])
    table.declare("AwsPartitionID", "partition 'aws'")

    assert "AwsPartitionID" in table
    assert "re" in table
    assert len(table) == 2
