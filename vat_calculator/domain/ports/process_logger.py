"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio que se registran durante una ejecución:
- "Se recibió un archivo"
- "Se descartaron N filas sin fecha"
- "Se resumió el periodo 2024-03"

La implementación decide el CÓMO: en consola con ConsoleLogger, en
memoria durante los tests. El parser y el agregador no escriben en la
bitácora; solo el VatProcessor lo hace, a partir del diagnóstico que
el parser devuelve.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Lectura ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado sin leerse.

        Args:
            reason: Ejemplo: "Ninguna fuente puede manejar '.xlsx'"
        """
        ...

    @abstractmethod
    def log_read_start(self, file_path: Path, source_name: str) -> None:
        ...

    # --- Ingesta ---

    @abstractmethod
    def log_ingestion_complete(
        self, file_name: str, num_transacciones: int, num_periodos: int
    ) -> None:
        """Registra el fin de la ingesta de un archivo (o texto)."""
        ...

    @abstractmethod
    def log_rows_dropped(self, file_name: str, num_filas: int) -> None:
        """Registra filas descartadas por no tener fecha de emisión."""
        ...

    @abstractmethod
    def log_invalid_dates(self, file_name: str, num_filas: int) -> None:
        """Registra filas conservadas bajo el periodo 'NaN-NaN'."""
        ...

    @abstractmethod
    def log_missing_columns(self, file_name: str, columnas: tuple[str, ...]) -> None:
        """Registra columnas requeridas ausentes del encabezado."""
        ...

    @abstractmethod
    def log_rows_recovered(self, file_name: str, num_filas: int) -> None:
        """Registra filas con comillas mal formadas divididas sin respetar comillas."""
        ...

    # --- Resumen ---

    @abstractmethod
    def log_period_summarized(self, periodo: str, num_transacciones: int) -> None:
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error de lectura o de escritura."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de toda la ejecución.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_transacciones': int,
                'filas_descartadas': int,
                'filas_fecha_invalida': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
