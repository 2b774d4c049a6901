"""endpointgen: genera módulos Python con las tablas de endpoints de un modelo.

Por qué:
- El modelo (`endpoints.json`) cambia con cada release; el código generado
  lo embebe como estructuras estáticas para no parsear JSON en runtime.
"""

__version__ = "0.1.0"
