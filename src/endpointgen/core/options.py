"""Opciones de una ejecución de generación."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

DEFAULT_MODEL_IMPORT = "endpointgen.core.domain.models"


@dataclass
class DecodeModelOptions:
    """Opciones que se reenvían tal cual al decoder."""

    skip_customizations: bool = False


@dataclass
class CodeGenOptions:
    """Configuration for one code generation run."""

    decode_model_options: DecodeModelOptions = field(default_factory=DecodeModelOptions)
    disable_generate_service_ids: bool = False
    namespace_region_consts: bool = False
    model_import: str = DEFAULT_MODEL_IMPORT

    def set(self, *option_fns: Callable[[CodeGenOptions], None]) -> CodeGenOptions:
        """Apply option callbacks in order and return `self`."""

        for fn in option_fns:
            fn(self)
        return self
