"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (paquetes, destinos, resultados).
- El dominio no conoce subprocesos ni sistema de archivos.
"""
