"""
Servicio de dominio: Procesador de exportaciones de IVA.

Orquesta el flujo completo que la presentación necesita:
1. Recibe una ruta a una exportación.
2. Selecciona el TextSource adecuado (can_handle) y lee el texto.
3. Parsea con el RecordParser y registra el diagnóstico en la bitácora.
4. Calcula el ResumenIVA del periodo seleccionado (o el por defecto).

El parser y el agregador son puros; este servicio es el único que toca
la bitácora. El CLI solo decide QUÉ archivo procesar y DÓNDE mostrar o
guardar los resultados.
"""

from collections.abc import Sequence
from pathlib import Path

from vat_calculator.domain.exceptions import ExtractionError, FormatoInvalidoError
from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta
from vat_calculator.domain.models.resumen_iva import ResumenIVA
from vat_calculator.domain.ports.process_logger import ProcessLogger
from vat_calculator.domain.ports.record_parser import RecordParser
from vat_calculator.domain.ports.text_source import TextSource
from vat_calculator.domain.services.period_aggregator import summarize


class VatProcessor:
    """Procesa una exportación y produce resultados de ingesta y resúmenes.

    Recibe sus dependencias por constructor. No sabe qué TextSource ni
    qué RecordParser concretos se están usando, solo las interfaces.
    """

    def __init__(
        self,
        text_sources: Sequence[TextSource],
        record_parser: RecordParser,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            text_sources: Fuentes disponibles, en orden de prioridad. Se usa
                          la primera cuyo can_handle devuelva True.
            record_parser: Parser de la exportación.
            logger: Bitácora de procesamiento.
        """
        self._sources = text_sources
        self._parser = record_parser
        self._logger = logger

    def process_file(self, file_path: Path) -> ResultadoIngesta | None:
        """Lee y parsea un archivo.

        Returns:
            ResultadoIngesta si el archivo se pudo leer (aunque esté vacío).
            None si ninguna fuente lo acepta o la lectura falló; el error
            queda registrado en la bitácora.
        """
        self._logger.log_file_received(file_path, file_path.suffix or "sin extensión")

        source = self._find_source(file_path)
        if source is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ninguna fuente puede manejar '{file_path.suffix or file_path.name}'",
            )
            return None

        self._logger.log_read_start(file_path, source.name)
        try:
            raw_text = source.read(file_path)
        except (ExtractionError, FormatoInvalidoError) as e:
            self._logger.log_error(file_path, e)
            return None

        return self.process_text(raw_text, file_name=file_path.name)

    def process_text(self, raw_text: str, file_name: str = "") -> ResultadoIngesta:
        """Parsea texto ya leído y registra el diagnóstico de la ingesta."""
        resultado = self._parser.parse(raw_text, file_name=file_name)
        diagnostico = resultado.diagnostico
        nombre = file_name or "<texto>"

        if diagnostico.columnas_faltantes:
            self._logger.log_missing_columns(nombre, diagnostico.columnas_faltantes)
        if diagnostico.filas_sin_fecha:
            self._logger.log_rows_dropped(nombre, diagnostico.filas_sin_fecha)
        if diagnostico.filas_fecha_invalida:
            self._logger.log_invalid_dates(nombre, diagnostico.filas_fecha_invalida)
        if diagnostico.filas_recuperadas:
            self._logger.log_rows_recovered(nombre, diagnostico.filas_recuperadas)

        self._logger.log_ingestion_complete(
            nombre, resultado.num_transacciones, len(resultado.periodos)
        )
        return resultado

    def summarize_period(
        self, resultado: ResultadoIngesta, periodo: str | None = None
    ) -> ResumenIVA | None:
        """Calcula el ResumenIVA del periodo pedido.

        Args:
            resultado: Resultado de una ingesta previa.
            periodo: Clave a resumir. Si es None se usa el periodo por defecto
                     (el más reciente).

        Returns:
            ResumenIVA, o None cuando no se pidió periodo y la ingesta no
            tiene ninguno (estado "sin datos").
        """
        seleccionado = periodo if periodo is not None else resultado.periodo_por_defecto
        if seleccionado is None:
            return None

        resumen = summarize(resultado.transacciones, seleccionado)
        self._logger.log_period_summarized(seleccionado, resumen.num_transacciones)
        return resumen

    def _find_source(self, file_path: Path) -> TextSource | None:
        for source in self._sources:
            if source.can_handle(file_path):
                return source
        return None
