"""Modelos del dominio.

Aquí viven las formas tipadas que produce la decodificación (Pydantic v2)
y los alias del valor JSON genérico. Nada de HTTP ni de CLI.
"""
