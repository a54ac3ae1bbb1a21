"""
Puerto de salida: Escritor de reportes de IVA.

Define el contrato para escribir un resumen de IVA en algún formato
persistente. Hoy es Excel; el dominio no conoce el formato.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta
from vat_calculator.domain.models.resumen_iva import ResumenIVA


class OutputWriter(ABC):
    """Interfaz para escribir reportes de IVA."""

    @abstractmethod
    def write_summary(self, resumen: ResumenIVA, output_path: Path) -> Path:
        """Escribe el resumen de un solo periodo con su detalle.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...

    @abstractmethod
    def write_overview(self, resultado: ResultadoIngesta, output_path: Path) -> Path:
        """Escribe una fila por periodo con las cifras de IVA de cada uno.

        Raises:
            OutputError: Si falla la escritura o no hay periodos.
        """
        ...
