"""daia-test: validación de servidores DAIA contra casos de disponibilidad."""

__version__ = "0.1.0"
