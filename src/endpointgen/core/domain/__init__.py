"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce JSON, templates ni CLI: solo particiones, regiones,
  servicios y endpoints.
"""
