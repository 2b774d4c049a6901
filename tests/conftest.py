from __future__ import annotations

from pathlib import Path

import pytest

from endpointgen.adapters.endpoints_model import decode_model
from endpointgen.core.domain.models import (
    Endpoint,
    EndpointKey,
    Partition,
    Region,
    Resolver,
    Service,
)
from endpointgen.core.options import DecodeModelOptions

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def model_path() -> Path:
    return FIXTURES / "endpoints.json"


@pytest.fixture
def resolver(model_path: Path) -> Resolver:
    with model_path.open("rb") as fh:
        return decode_model(fh)


@pytest.fixture
def raw_resolver(model_path: Path) -> Resolver:
    with model_path.open("rb") as fh:
        return decode_model(fh, DecodeModelOptions(skip_customizations=True))


@pytest.fixture
def minimal_resolver() -> Resolver:
    return Resolver(
        [
            Partition(
                id="aws",
                name="AWS Standard",
                dns_suffix="amazonaws.com",
                regions={"us-east-1": Region(description="US East")},
                services={
                    "ec2": Service(endpoints={EndpointKey(region="us-east-1"): Endpoint()}),
                },
            )
        ]
    )
