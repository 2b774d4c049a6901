"""Code generation orchestration.

This module wires the three stages of one generation run together:
decode the endpoints model, render it with the configured options, and hand
the finished document to the output sink. The CLI delegates here so the same
flow is reusable from build scripts and tests, with printing kept out of the
core logic.

The document is rendered fully in memory before anything is written, so a
decode or render failure never leaves a truncated file behind.
"""

from __future__ import annotations

import logging
from typing import IO, Callable

from endpointgen.adapters.endpoints_model import JsonModelDecoder
from endpointgen.adapters.source_renderer import EndpointsSourceRenderer
from endpointgen.core.domain.models import Resolver
from endpointgen.core.errors import OutputEncodingError
from endpointgen.core.interfaces.decoder import ModelDecoder
from endpointgen.core.options import CodeGenOptions

logger = logging.getLogger(__name__)

OptionFn = Callable[[CodeGenOptions], None]


def render_resolver(resolver: Resolver, options: CodeGenOptions | None = None) -> str:
    """Render an already decoded model into module source."""

    return EndpointsSourceRenderer(options).render(resolver)


def code_gen_model(
    model_file: IO[str] | IO[bytes],
    out_file: IO[str],
    *option_fns: OptionFn,
    decoder: ModelDecoder | None = None,
) -> Resolver:
    """Decode `model_file` and write the generated module to `out_file`.

    Raises `DecodeModelError`, `UnknownVariantError`, `SymbolCollisionError`,
    `InvalidSymbolError`, `TemplateExecutionError` or `OutputEncodingError`;
    nothing is written when any of them is raised. Returns the decoded model
    for callers that want to report on it.
    """

    options = CodeGenOptions().set(*option_fns)
    decoder = decoder or JsonModelDecoder()

    resolver = decoder.decode(model_file, options.decode_model_options)
    logger.debug("decoded model with %d partitions", len(resolver))

    source = render_resolver(resolver, options)
    try:
        size = len(source.encode("utf-8"))
    except UnicodeEncodeError as exc:
        raise OutputEncodingError(f"generated source is not valid UTF-8, {exc}") from exc

    out_file.write(source)
    logger.info(
        "generated %d bytes for %d partitions (service ids %s)",
        size,
        len(resolver),
        "disabled" if options.disable_generate_service_ids else "enabled",
    )
    return resolver


def with_options(options: CodeGenOptions) -> OptionFn:
    """Option callback that copies a fully built `CodeGenOptions`."""

    def apply(target: CodeGenOptions) -> None:
        target.decode_model_options = options.decode_model_options
        target.disable_generate_service_ids = options.disable_generate_service_ids
        target.namespace_region_consts = options.namespace_region_consts
        target.model_import = options.model_import

    return apply
