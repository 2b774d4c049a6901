"""Errores del generador.

Por qué una jerarquía propia:
- La CLI captura `CodeGenError` y decide el exit code sin conocer cada fallo.
- Todos los errores son terminales: no hay reintentos ni éxito parcial.
"""

from __future__ import annotations


class CodeGenError(Exception):
    """Base de todos los fallos de una ejecución de generación."""


class DecodeModelError(CodeGenError):
    """El documento de entrada no se pudo decodificar como modelo de endpoints."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        if cause is not None:
            message = f"{message}, {cause}"
        super().__init__(message)


class UnknownVariantError(CodeGenError):
    """Un bitmask de variante contiene bits fuera de FIPS/dual-stack."""

    def __init__(self, variant: int) -> None:
        self.variant = variant
        super().__init__(f"unknown endpoint variant: {variant}")


class TemplateExecutionError(CodeGenError):
    """Fallo del motor de templates al recorrer el modelo."""


class SymbolCollisionError(CodeGenError):
    """Dos identificadores distintos producen el mismo símbolo."""

    def __init__(self, symbol: str, first: str, second: str) -> None:
        self.symbol = symbol
        self.first = first
        self.second = second
        super().__init__(f"symbol {symbol!r} declared by both {first} and {second}")


class InvalidSymbolError(CodeGenError):
    """El símbolo sintetizado no es un identificador Python válido."""

    def __init__(self, symbol: str, origin: str) -> None:
        self.symbol = symbol
        self.origin = origin
        super().__init__(f"{origin} synthesizes {symbol!r}, which is not a valid identifier")


class OutputEncodingError(CodeGenError):
    """El módulo generado no se puede codificar como UTF-8."""
