"""Contratos que el generador espera de sus colaboradores.

Por qué:
- El pipeline solo conoce el `Protocol` del decoder, no el JSON concreto.
- Los tests sustituyen el decoder por un stub sin tocar el Core.
"""
