"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y acumula contadores para el resumen final.
"""

from pathlib import Path

from vat_calculator.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._total_transacciones: int = 0
        self._filas_descartadas: int = 0
        self._filas_fecha_invalida: int = 0
        self._filas_recuperadas: int = 0
        self._errores: list[dict] = []

    # --- Lectura ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    def log_read_start(self, file_path: Path, source_name: str) -> None:
        print(f"  🔍 Leyendo ({source_name}): {file_path.name}")

    # --- Ingesta ---

    def log_ingestion_complete(
        self, file_name: str, num_transacciones: int, num_periodos: int
    ) -> None:
        self._archivos_procesados += 1
        self._total_transacciones += num_transacciones
        print(
            f"  ✅ Completado: {file_name}: "
            f"{num_transacciones} transacciones, {num_periodos} periodos"
        )

    def log_rows_dropped(self, file_name: str, num_filas: int) -> None:
        self._filas_descartadas += num_filas
        print(f"  ⚠️  {file_name}: {num_filas} filas sin fecha de emisión descartadas")

    def log_invalid_dates(self, file_name: str, num_filas: int) -> None:
        self._filas_fecha_invalida += num_filas
        print(f"  ⚠️  {file_name}: {num_filas} filas con fecha ilegible agrupadas en 'NaN-NaN'")

    def log_rows_recovered(self, file_name: str, num_filas: int) -> None:
        self._filas_recuperadas += num_filas
        print(f"  ⚠️  {file_name}: {num_filas} filas con comillas mal formadas divididas sin comillas")

    def log_missing_columns(self, file_name: str, columnas: tuple[str, ...]) -> None:
        print(f"  ⚠️  {file_name}: columnas no encontradas: {', '.join(columnas)}")

    # --- Resumen ---

    def log_period_summarized(self, periodo: str, num_transacciones: int) -> None:
        print(f"  📊 Periodo {periodo}: {num_transacciones} transacciones")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name}: {error}")

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "total_transacciones": self._total_transacciones,
            "filas_descartadas": self._filas_descartadas,
            "filas_fecha_invalida": self._filas_fecha_invalida,
            "filas_recuperadas": self._filas_recuperadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:      {self._archivos_recibidos}")
        print(f"  Archivos procesados:     {self._archivos_procesados}")
        print(f"  Archivos descartados:    {self._archivos_descartados}")
        print(f"  Archivos con error:      {len(self._errores)}")
        print(f"  Total transacciones:     {self._total_transacciones}")
        print(f"  Filas sin fecha:         {self._filas_descartadas}")
        print(f"  Filas con fecha ilegible: {self._filas_fecha_invalida}")
        print(f"  Filas recuperadas:       {self._filas_recuperadas}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
