"""
Tests para ConsoleLogger: contadores del resumen y salida a consola.
"""

from pathlib import Path

from vat_calculator.adapters.output.loggers.console_logger import ConsoleLogger
from vat_calculator.domain.exceptions import ExtractionError


class TestConsoleLogger:
    def test_resumen_inicial_en_ceros(self):
        summary = ConsoleLogger().get_summary()

        assert summary == {
            "archivos_recibidos": 0,
            "archivos_procesados": 0,
            "archivos_descartados": 0,
            "archivos_con_error": 0,
            "total_transacciones": 0,
            "filas_descartadas": 0,
            "filas_fecha_invalida": 0,
            "filas_recuperadas": 0,
            "errores": [],
        }

    def test_acumula_contadores(self, capsys):
        logger = ConsoleLogger()
        ruta = Path("/tmp/export.csv")

        logger.log_file_received(ruta, ".csv")
        logger.log_read_start(ruta, "archivo-utf-8-sig")
        logger.log_rows_dropped("export.csv", 2)
        logger.log_invalid_dates("export.csv", 1)
        logger.log_rows_recovered("export.csv", 3)
        logger.log_ingestion_complete("export.csv", 10, 3)
        logger.log_file_received(Path("/tmp/otro.pdf"), ".pdf")
        logger.log_file_skipped(Path("/tmp/otro.pdf"), "extensión no soportada")

        summary = logger.get_summary()
        assert summary["archivos_recibidos"] == 2
        assert summary["archivos_procesados"] == 1
        assert summary["archivos_descartados"] == 1
        assert summary["total_transacciones"] == 10
        assert summary["filas_descartadas"] == 2
        assert summary["filas_fecha_invalida"] == 1
        assert summary["filas_recuperadas"] == 3

        salida = capsys.readouterr().out
        assert "Recibido: export.csv (.csv)" in salida
        assert "10 transacciones, 3 periodos" in salida
        assert "2 filas sin fecha" in salida
        assert "'NaN-NaN'" in salida
        assert "3 filas con comillas mal formadas" in salida

    def test_registra_errores(self, capsys):
        logger = ConsoleLogger()
        error = ExtractionError("/tmp/latin1.csv", "el contenido no está en utf-8-sig")

        logger.log_error(Path("/tmp/latin1.csv"), error)

        summary = logger.get_summary()
        assert summary["archivos_con_error"] == 1
        assert summary["errores"] == [{"archivo": "latin1.csv", "error": str(error)}]
        assert "❌ Error: latin1.csv" in capsys.readouterr().out

    def test_columnas_faltantes_y_periodo(self, capsys):
        logger = ConsoleLogger()

        logger.log_missing_columns("export.csv", ("vat amount", "category"))
        logger.log_period_summarized("2024-03", 7)

        salida = capsys.readouterr().out
        assert "columnas no encontradas: vat amount, category" in salida
        assert "Periodo 2024-03: 7 transacciones" in salida

    def test_print_summary(self, capsys):
        logger = ConsoleLogger()
        logger.log_error(Path("x.csv"), ValueError("roto"))

        logger.print_summary()

        salida = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in salida
        assert "Archivos con error:      1" in salida
        assert "- x.csv: roto" in salida
