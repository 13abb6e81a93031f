"""Adaptadores de I/O (HTTP, CSV, registro JSON-LD, exportación)."""
