"""Configuración del generador.

Por qué aquí:
- Centraliza los defaults de la CLI (pydantic-settings) sin que el pipeline
  lea variables de entorno: el Core recibe siempre un `CodeGenOptions` explícito.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from endpointgen.core.options import DEFAULT_MODEL_IMPORT, CodeGenOptions, DecodeModelOptions


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / `.env`) sin ensuciar el Core.
    - Un único contrato de configuración para la CLI y scripts de build.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDPOINTGEN_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    disable_generate_service_ids: bool = Field(
        default=False,
        description="No generar las constantes de IDs de servicio.",
    )
    skip_customizations: bool = Field(
        default=False,
        description="No aplicar los ajustes post-decode del modelo.",
    )
    namespace_region_consts: bool = Field(
        default=False,
        description="Prefijar las constantes de región con el símbolo de la partición.",
    )
    model_import: str = Field(
        default=DEFAULT_MODEL_IMPORT,
        min_length=1,
        description="Módulo desde el que el código generado importa los tipos del modelo.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )

    def codegen_options(self) -> CodeGenOptions:
        return CodeGenOptions(
            decode_model_options=DecodeModelOptions(skip_customizations=self.skip_customizations),
            disable_generate_service_ids=self.disable_generate_service_ids,
            namespace_region_consts=self.namespace_region_consts,
            model_import=self.model_import,
        )
