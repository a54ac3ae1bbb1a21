"""
Punto de entrada CLI: vat-calculator.

Uso:
    # Resumen del periodo más reciente
    vat-calculator /ruta/export_qonto.csv

    # Resumen de un periodo concreto
    vat-calculator /ruta/export_qonto.csv -p 2024-03

    # Ver los periodos disponibles
    vat-calculator /ruta/export_qonto.csv --listar-periodos

    # Además, guardar el resumen en Excel
    vat-calculator /ruta/export_qonto.csv -p 2024-03 -o /ruta/iva_2024_03.xlsx

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
crea las instancias concretas (FileTextSource, CsvRecordParser,
ConsoleLogger, ExcelWriter) y las inyecta en el VatProcessor.
No contiene lógica de negocio.
"""

import argparse
import sys
from pathlib import Path

from vat_calculator.adapters.input.record_parsers.csv_record_parser import CsvRecordParser
from vat_calculator.adapters.input.text_sources.file_text_source import FileTextSource
from vat_calculator.adapters.output.loggers.console_logger import ConsoleLogger
from vat_calculator.adapters.output.reports.console_report import ConsoleReport
from vat_calculator.adapters.output.writers.excel_writer import ExcelWriter
from vat_calculator.domain.exceptions import OutputError
from vat_calculator.domain.services.vat_processor import VatProcessor
from vat_calculator.domain.shared.period import PERIODO_INVALIDO, is_valid_period


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()
    record_parser = CsvRecordParser(
        delimitador=args.delimitador,
        respetar_comillas=not args.modo_original,
    )
    processor = VatProcessor(
        text_sources=[FileTextSource()],
        record_parser=record_parser,
        logger=logger,
    )
    report = ConsoleReport(moneda=args.moneda, idioma=args.idioma)
    excel_writer = ExcelWriter()

    print("=" * 60)
    print("CALCULADORA DE IVA")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Formato:  {record_parser.format_name} (delimitador '{args.delimitador}')")
    print()

    # --- Ingesta ---
    resultado = processor.process_file(input_path)
    if resultado is None:
        print("\n❌ No se pudo leer el archivo.")
        logger.print_summary()
        sys.exit(1)

    if resultado.esta_vacio:
        print("\n❌ El archivo no contiene transacciones con fecha de emisión.")
        logger.print_summary()
        sys.exit(1)

    if args.listar_periodos:
        print("\nPeriodos disponibles (* = por defecto):")
        print(report.render_periods(resultado))
        logger.print_summary()
        return

    if args.periodo and args.periodo != PERIODO_INVALIDO and not is_valid_period(args.periodo):
        print(f"  ⚠️  '{args.periodo}' no tiene forma YYYY-MM; el resumen estará vacío.")

    # --- Resumen del periodo ---
    resumen = processor.summarize_period(resultado, args.periodo)
    print()
    print(report.render(resumen))

    # --- Reportes Excel ---
    try:
        if args.output:
            ruta = excel_writer.write_summary(resumen, Path(args.output))
            print(f"\n📁 Excel generado: {ruta}")
        if args.resumen_general:
            ruta = excel_writer.write_overview(resultado, Path(args.resumen_general))
            print(f"\n📁 Resumen por periodos generado: {ruta}")
    except OutputError as e:
        logger.log_error(Path(e.ruta_salida), e)
        logger.print_summary()
        sys.exit(1)

    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Calcula el IVA repercutido, deducible y a pagar de una exportación contable",
        epilog="Ejemplo: vat-calculator export_qonto.csv -p 2024-03",
    )

    parser.add_argument(
        "input_path",
        help="Ruta al archivo CSV exportado",
    )

    parser.add_argument(
        "-p",
        "--periodo",
        dest="periodo",
        help="Periodo a resumir (YYYY-MM). Por defecto, el más reciente.",
    )

    parser.add_argument(
        "--listar-periodos",
        dest="listar_periodos",
        action="store_true",
        help="Solo muestra los periodos disponibles.",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Ruta del Excel con el resumen y el detalle del periodo.",
    )

    parser.add_argument(
        "--resumen-general",
        dest="resumen_general",
        help="Ruta del Excel con una fila por cada periodo del archivo.",
    )

    parser.add_argument(
        "-d",
        "--delimitador",
        dest="delimitador",
        default=",",
        help="Separador de celdas (por defecto ',').",
    )

    parser.add_argument(
        "--modo-original",
        dest="modo_original",
        action="store_true",
        help="Divide las celdas sin respetar comillas, como la calculadora web.",
    )

    parser.add_argument(
        "--moneda",
        dest="moneda",
        default="EUR",
        choices=["EUR", "MXN", "USD"],
        help="Moneda para mostrar los montos (no se convierte).",
    )

    parser.add_argument(
        "--idioma",
        dest="idioma",
        default="es",
        choices=["es", "fr"],
        help="Idioma de los nombres de mes.",
    )

    args = parser.parse_args(argv)
    if len(args.delimitador) != 1:
        parser.error("--delimitador debe ser un solo carácter")
    return args


if __name__ == "__main__":
    main()
