"""
Tests para VatProcessor (vat_calculator.domain.services.vat_processor).

Se usa un logger en memoria en lugar del ConsoleLogger para poder
verificar QUÉ eventos se registran sin depender del texto impreso.
El parser y la fuente de archivos son los reales.
"""

import pytest

from vat_calculator.adapters.input.record_parsers.csv_record_parser import CsvRecordParser
from vat_calculator.adapters.input.text_sources.file_text_source import FileTextSource
from vat_calculator.domain.exceptions import ExtractionError, FormatoInvalidoError
from vat_calculator.domain.ports.process_logger import ProcessLogger
from vat_calculator.domain.services.vat_processor import VatProcessor

ENCABEZADO = "emitted at,side,amount,vat amount,counterparty name,category"


class MemoryLogger(ProcessLogger):
    """Registra cada evento como una tupla (nombre, *argumentos)."""

    def __init__(self) -> None:
        self.eventos: list[tuple] = []

    def log_file_received(self, file_path, file_type):
        self.eventos.append(("received", file_path.name, file_type))

    def log_file_skipped(self, file_path, reason):
        self.eventos.append(("skipped", file_path.name, reason))

    def log_read_start(self, file_path, source_name):
        self.eventos.append(("read_start", file_path.name, source_name))

    def log_ingestion_complete(self, file_name, num_transacciones, num_periodos):
        self.eventos.append(("complete", file_name, num_transacciones, num_periodos))

    def log_rows_dropped(self, file_name, num_filas):
        self.eventos.append(("rows_dropped", file_name, num_filas))

    def log_invalid_dates(self, file_name, num_filas):
        self.eventos.append(("invalid_dates", file_name, num_filas))

    def log_missing_columns(self, file_name, columnas):
        self.eventos.append(("missing_columns", file_name, columnas))

    def log_rows_recovered(self, file_name, num_filas):
        self.eventos.append(("rows_recovered", file_name, num_filas))

    def log_period_summarized(self, periodo, num_transacciones):
        self.eventos.append(("summarized", periodo, num_transacciones))

    def log_error(self, file_path, error):
        self.eventos.append(("error", file_path.name, error))

    def get_summary(self):
        return {"eventos": len(self.eventos)}

    def nombres(self) -> list[str]:
        return [e[0] for e in self.eventos]


@pytest.fixture
def logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def processor(logger) -> VatProcessor:
    return VatProcessor(
        text_sources=[FileTextSource()],
        record_parser=CsvRecordParser(),
        logger=logger,
    )


def _csv(*filas: str) -> str:
    return "\n".join([ENCABEZADO, *filas]) + "\n"


class TestProcessText:
    def test_registra_ingesta_completa(self, processor, logger):
        texto = _csv(
            "2024-03-05,credit,120,20,Cliente,Ventas",
            "2024-02-10,debit,60,10,Proveedor,Compras",
        )

        resultado = processor.process_text(texto, file_name="marzo.csv")

        assert resultado.num_transacciones == 2
        assert logger.eventos == [("complete", "marzo.csv", 2, 2)]

    def test_sin_nombre_de_archivo(self, processor, logger):
        processor.process_text(_csv("2024-03-05,credit,120,20,Cliente,Ventas"))
        assert logger.eventos == [("complete", "<texto>", 1, 1)]

    def test_registra_diagnostico(self, processor, logger):
        texto = _csv(
            ",credit,120,20,Sin fecha,Ventas",
            "basura,credit,120,20,Fecha rara,Ventas",
            "2024-03-05,credit,120,20,Cliente,Ventas",
        )

        processor.process_text(texto, file_name="x.csv")

        assert logger.eventos == [
            ("rows_dropped", "x.csv", 1),
            ("invalid_dates", "x.csv", 1),
            ("complete", "x.csv", 2, 2),
        ]

    def test_registra_columnas_faltantes(self, processor, logger):
        texto = "emitted at,side,amount\n2024-03-05,credit,120\n"

        processor.process_text(texto, file_name="x.csv")

        assert logger.eventos[0] == (
            "missing_columns",
            "x.csv",
            ("vat amount", "counterparty name", "category"),
        )

    def test_registra_filas_recuperadas(self, processor, logger):
        texto = _csv(
            '"2024-03-05,credit,120,20,Cliente,Ventas',
            "2024-03-06,debit,60,10,OVH,Hosting",
        )

        resultado = processor.process_text(texto, file_name="x.csv")

        assert resultado.num_transacciones == 2
        assert ("rows_recovered", "x.csv", 1) in logger.eventos


class TestProcessFile:
    def test_archivo_csv(self, processor, logger, tmp_path):
        archivo = tmp_path / "export.csv"
        archivo.write_text(_csv("2024-03-05,credit,120,20,Cliente,Ventas"), encoding="utf-8")

        resultado = processor.process_file(archivo)

        assert resultado is not None
        assert resultado.archivo_origen == "export.csv"
        assert resultado.periodos == ("2024-03",)
        assert logger.nombres() == ["received", "read_start", "complete"]

    def test_extension_no_soportada_se_descarta(self, processor, logger, tmp_path):
        archivo = tmp_path / "export.xlsx"
        archivo.write_bytes(b"PK")

        assert processor.process_file(archivo) is None
        assert logger.nombres() == ["received", "skipped"]

    def test_archivo_inexistente_registra_error(self, processor, logger, tmp_path):
        assert processor.process_file(tmp_path / "no_existe.csv") is None

        evento = logger.eventos[-1]
        assert evento[0] == "error"
        assert isinstance(evento[2], FormatoInvalidoError)

    def test_codificacion_invalida_registra_error(self, processor, logger, tmp_path):
        archivo = tmp_path / "latin1.csv"
        archivo.write_bytes(ENCABEZADO.encode() + b"\n2024-03-05,credit,1,1,Soci\xe9t\xe9,x\n")

        assert processor.process_file(archivo) is None

        evento = logger.eventos[-1]
        assert evento[0] == "error"
        assert isinstance(evento[2], ExtractionError)

    def test_usa_la_primera_fuente_que_acepta(self, logger, tmp_path):
        archivo = tmp_path / "export.txt"
        archivo.write_text(_csv("2024-03-05,credit,120,20,Cliente,Ventas"), encoding="utf-8")
        processor = VatProcessor(
            text_sources=[FileTextSource(extensiones=(".csv",)), FileTextSource(encoding="utf-8")],
            record_parser=CsvRecordParser(),
            logger=logger,
        )

        processor.process_file(archivo)

        assert ("read_start", "export.txt", "archivo-utf-8") in logger.eventos


class TestSummarizePeriod:
    def test_periodo_por_defecto(self, processor, logger):
        resultado = processor.process_text(
            _csv(
                "2024-02-10,credit,120,20,Cliente,Ventas",
                "2024-03-05,credit,60,10,Cliente,Ventas",
            )
        )

        resumen = processor.summarize_period(resultado)

        assert resumen.periodo == "2024-03"
        assert resumen.iva_repercutido == 10.0
        assert logger.eventos[-1] == ("summarized", "2024-03", 1)

    def test_periodo_explicito(self, processor):
        resultado = processor.process_text(
            _csv(
                "2024-02-10,credit,120,20,Cliente,Ventas",
                "2024-03-05,credit,60,10,Cliente,Ventas",
            )
        )

        resumen = processor.summarize_period(resultado, "2024-02")

        assert resumen.periodo == "2024-02"
        assert resumen.iva_repercutido == 20.0

    def test_sin_datos_devuelve_none(self, processor, logger):
        resultado = processor.process_text("")

        assert processor.summarize_period(resultado) is None
        assert "summarized" not in logger.nombres()

    def test_periodo_explicito_sin_datos_da_ceros(self, processor):
        resultado = processor.process_text("")

        resumen = processor.summarize_period(resultado, "2024-03")

        assert resumen.iva_a_pagar == 0.0
        assert resumen.num_transacciones == 0


def test_memory_logger_implementa_el_puerto():
    assert isinstance(MemoryLogger(), ProcessLogger)
    assert MemoryLogger().get_summary() == {"eventos": 0}


def test_archivo_vacio_da_resultado_vacio(processor, tmp_path):
    archivo = tmp_path / "vacio.csv"
    archivo.write_text("", encoding="utf-8")

    resultado = processor.process_file(archivo)

    assert resultado is not None
    assert resultado.esta_vacio
