"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los adaptadores (git, fakes en tests).
- Los servicios dependen del contrato, no del subproceso.
"""
