from endpointgen.adapters.endpoints_model.customizations import apply_customizations
from endpointgen.adapters.endpoints_model.loader import JsonModelDecoder, decode_model
from endpointgen.adapters.endpoints_model.models import PartitionDocument

__all__ = [
    "JsonModelDecoder",
    "PartitionDocument",
    "apply_customizations",
    "decode_model",
]
