"""Capa CLI (Typer) y formato de salida."""
