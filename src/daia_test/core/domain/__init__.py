"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos de un run de validación.
- El dominio no conoce HTTP ni CLI: solo casos, aserciones y contadores.
"""
