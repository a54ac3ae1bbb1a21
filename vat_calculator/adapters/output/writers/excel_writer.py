"""
Adaptador de salida: Escritor de Excel.

Genera libros Excel con el resumen de IVA:
- write_summary: un periodo, hojas "Resumen", "Repercutido" y "Deducible".
- write_overview: todos los periodos de la exportación, hoja "Periodos".

Los montos se escriben como número (no como texto formateado) para que
el contador pueda seguir operando con ellos en la hoja.
"""

from pathlib import Path

import pandas as pd

from vat_calculator.domain.exceptions import OutputError
from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta
from vat_calculator.domain.models.resumen_iva import ResumenIVA
from vat_calculator.domain.models.transaccion import Transaccion
from vat_calculator.domain.ports.output_writer import OutputWriter
from vat_calculator.domain.services.period_aggregator import group_by_period, summarize
from vat_calculator.domain.shared.date_parser import format_fecha
from vat_calculator.domain.shared.month_map import period_label

_COLUMNAS_DETALLE = ["Fecha", "Contraparte", "Categoría", "Monto", "IVA"]


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_summary(self, resumen: ResumenIVA, output_path: Path) -> Path:
        """Escribe el resumen de un periodo con sus dos detalles.

        Args:
            resumen: Resumen calculado por el agregador.
            output_path: Ruta del archivo. Si no termina en .xlsx se le
                        agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        df_resumen = pd.DataFrame([self._summary_row(resumen)])
        hojas = {
            "Resumen": df_resumen,
            "Repercutido": self._detail_frame(resumen.detalle_repercutido),
            "Deducible": self._detail_frame(resumen.detalle_deducible),
        }

        try:
            output_path = self._prepare_path(output_path)
            self._escribir_excel(hojas, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def write_overview(self, resultado: ResultadoIngesta, output_path: Path) -> Path:
        """Escribe una fila por periodo, del más reciente al más antiguo."""
        if resultado.esta_vacio:
            raise OutputError(str(output_path), "No hay periodos para resumir")

        grupos = group_by_period(resultado.transacciones)
        filas = [
            self._summary_row(summarize(grupos[periodo], periodo))
            for periodo in resultado.periodos
        ]
        df_periodos = pd.DataFrame(filas)

        try:
            output_path = self._prepare_path(output_path)
            self._escribir_excel({"Periodos": df_periodos}, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _prepare_path(output_path: Path) -> Path:
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return output_path

    @staticmethod
    def _summary_row(resumen: ResumenIVA) -> dict:
        return {
            "Periodo": resumen.periodo,
            "Mes": period_label(resumen.periodo),
            "IVA repercutido": resumen.iva_repercutido,
            "IVA deducible": resumen.iva_deducible,
            "IVA a pagar": resumen.iva_a_pagar,
            "Num ventas": resumen.num_repercutidas,
            "Num compras": resumen.num_deducibles,
            "Num transacciones": resumen.num_transacciones,
        }

    @staticmethod
    def _detail_frame(transacciones: tuple[Transaccion, ...]) -> pd.DataFrame:
        filas = [
            {
                "Fecha": format_fecha(t.fecha_emision),
                "Contraparte": t.contraparte or "",
                "Categoría": t.categoria or "",
                "Monto": t.monto,
                "IVA": t.monto_iva,
            }
            for t in transacciones
        ]
        # columns= mantiene el encabezado aunque no haya filas
        return pd.DataFrame(filas, columns=_COLUMNAS_DETALLE)

    def _escribir_excel(self, hojas: dict[str, pd.DataFrame], output_path: Path) -> None:
        """Escribe cada DataFrame en su hoja y aplica anchos y formato de montos."""
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            workbook = writer.book
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            for nombre, df in hojas.items():
                df.to_excel(writer, index=False, sheet_name=nombre)
                worksheet = writer.sheets[nombre]
                for idx, columna in enumerate(df.columns):
                    if columna in ("IVA repercutido", "IVA deducible", "IVA a pagar", "Monto", "IVA"):
                        worksheet.set_column(idx, idx, 16, money_format)
                    elif columna in ("Contraparte", "Categoría", "Mes"):
                        worksheet.set_column(idx, idx, 30)
                    else:
                        worksheet.set_column(idx, idx, 14)
