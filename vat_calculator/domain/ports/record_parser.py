"""
Puerto de entrada: Parser de exportaciones contables.

Define el contrato que cada parser de exportación debe cumplir:

    RecordParser (interfaz)
    └── CsvRecordParser     → texto delimitado con encabezado (Qonto y compatibles)

El parser recibe el texto crudo ya leído (la lectura del archivo es
responsabilidad del TextSource) y devuelve un ResultadoIngesta completo.
Es una transformación pura: no hace I/O ni escribe en la bitácora.
"""

from abc import ABC, abstractmethod

from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta


class RecordParser(ABC):
    """Interfaz para convertir texto crudo en transacciones normalizadas."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Nombre legible del formato que maneja. Para la bitácora.

        Ejemplo: 'csv'
        """
        ...

    @abstractmethod
    def parse(self, raw_text: str, file_name: str = "") -> ResultadoIngesta:
        """Parsea el texto y devuelve transacciones, periodos y periodo por defecto.

        Args:
            raw_text: Contenido completo de la exportación.
            file_name: Nombre del archivo original. Para trazabilidad.

        Returns:
            ResultadoIngesta. Un texto sin líneas produce un resultado
            vacío con periodo_por_defecto=None.

        Nunca lanza excepción por celdas mal formadas: los montos se
        convierten a 0, las filas sin fecha se descartan y las fechas
        ilegibles se agrupan bajo 'NaN-NaN'.
        """
        ...
