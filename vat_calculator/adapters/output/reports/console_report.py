"""
Adaptador de salida: Reporte de IVA en texto.

Reproduce en consola la pantalla de la calculadora web:
- Tres cifras: IVA repercutido, IVA deducible y saldo.
- El saldo se etiqueta "IVA a pagar" si es >= 0 y "Crédito de IVA" si
  es negativo, y se muestra en valor absoluto.
- La fórmula del cálculo con el resultado CON signo.
- Dos tablas de detalle (fecha, contraparte, IVA).

Solo formatea: todas las cifras vienen calculadas en el ResumenIVA.
"""

from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta
from vat_calculator.domain.models.resumen_iva import ResumenIVA
from vat_calculator.domain.models.transaccion import Transaccion
from vat_calculator.domain.shared.amount import format_money
from vat_calculator.domain.shared.date_parser import format_fecha
from vat_calculator.domain.shared.month_map import period_label

_ANCHO = 60


class ConsoleReport:
    """Convierte resúmenes de IVA en texto listo para imprimir."""

    def __init__(self, moneda: str = "EUR", idioma: str = "es") -> None:
        self._moneda = moneda
        self._idioma = idioma

    def render(self, resumen: ResumenIVA) -> str:
        """Devuelve el reporte completo de un periodo."""
        m = self._money
        lineas = [
            "=" * _ANCHO,
            f"IVA: {period_label(resumen.periodo, self._idioma)}",
            "=" * _ANCHO,
            f"  IVA repercutido: {m(resumen.iva_repercutido):>18}   "
            f"({resumen.num_repercutidas} venta(s))",
            f"  IVA deducible:   {m(resumen.iva_deducible):>18}   "
            f"({resumen.num_deducibles} compra(s))",
        ]

        if resumen.es_credito:
            lineas.append(
                f"  Crédito de IVA:  {m(abs(resumen.iva_a_pagar)):>18}   "
                f"(la autoridad fiscal le debe)"
            )
        else:
            lineas.append(
                f"  IVA a pagar:     {m(resumen.iva_a_pagar):>18}   "
                f"(a ingresar a la autoridad fiscal)"
            )

        lineas += [
            "",
            f"  IVA a pagar = IVA repercutido ({m(resumen.iva_repercutido)}) "
            f"- IVA deducible ({m(resumen.iva_deducible)}) = {m(resumen.iva_a_pagar)}",
            f"  Transacciones del periodo: {resumen.num_transacciones}",
            "",
        ]

        lineas += self._detail_table(
            f"Detalle IVA repercutido ({resumen.num_repercutidas})",
            "Cliente",
            resumen.detalle_repercutido,
            "Ninguna venta con IVA este mes",
        )
        lineas.append("")
        lineas += self._detail_table(
            f"Detalle IVA deducible ({resumen.num_deducibles})",
            "Proveedor",
            resumen.detalle_deducible,
            "Ninguna compra con IVA este mes",
        )
        return "\n".join(lineas)

    def render_periods(self, resultado: ResultadoIngesta) -> str:
        """Lista los periodos disponibles, marcando el que se usa por defecto."""
        if resultado.esta_vacio:
            return "  (sin datos: el archivo no contiene transacciones con fecha)"

        lineas = []
        for periodo in resultado.periodos:
            marca = "*" if periodo == resultado.periodo_por_defecto else " "
            lineas.append(f"  {marca} {periodo}  {period_label(periodo, self._idioma)}")
        return "\n".join(lineas)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _money(self, monto: float) -> str:
        return format_money(monto, self._moneda)

    def _detail_table(
        self,
        titulo: str,
        etiqueta_contraparte: str,
        transacciones: tuple[Transaccion, ...],
        mensaje_vacio: str,
    ) -> list[str]:
        lineas = [titulo, "-" * _ANCHO]
        if not transacciones:
            lineas.append(f"  {mensaje_vacio}")
            return lineas

        lineas.append(f"  {'Fecha':<10}  {etiqueta_contraparte:<28}  {'IVA':>14}")
        for t in transacciones:
            contraparte = (t.contraparte or "")[:28]
            lineas.append(
                f"  {format_fecha(t.fecha_emision):<10}  {contraparte:<28}  "
                f"{self._money(t.monto_iva):>14}"
            )
        return lineas
