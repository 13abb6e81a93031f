"""Núcleo: configuración, dominio y orquestación (sin detalles de CLI)."""
