"""
Modelo de dominio: Transacción contable.

Una Transaccion representa una fila de la exportación contable (Qonto u
otra herramienta con el mismo encabezado): una venta, una compra, una
comisión, etc.

Decisiones de diseño:
- `fecha_emision` se guarda como texto, tal como viene en el archivo.
  Puede no ser una fecha válida; en ese caso `periodo` vale "NaN-NaN".
- `lado` no se valida contra un enum. Valores distintos de "debit" y
  "credit" se conservan y simplemente no entran en ningún cubo de IVA.
- Los montos son `float` y siempre finitos: el parser convierte cualquier
  texto ilegible a 0.
"""

from dataclasses import dataclass

from vat_calculator.domain.shared.period import PERIODO_INVALIDO

LADO_DEBITO = "debit"
LADO_CREDITO = "credit"


@dataclass(frozen=True)
class Transaccion:
    """Representa una transacción individual de la exportación."""

    fecha_emision: str
    """Texto de la columna 'emitted at'. Nunca vacío (las filas sin fecha
    se descartan antes de crear la transacción)."""

    periodo: str
    """Clave de agrupación 'YYYY-MM' derivada de `fecha_emision`.
    'NaN-NaN' si la fecha no se pudo interpretar."""

    lado: str | None
    """'debit' (compra/salida), 'credit' (venta/entrada) u otro valor.
    None si la columna no existe o la fila es más corta que el encabezado."""

    monto: float
    """Monto de la transacción. 0.0 si la celda no era numérica."""

    monto_iva: float
    """IVA de la transacción. 0.0 si la celda no era numérica."""

    contraparte: str | None = None
    """Nombre de la contraparte (cliente o proveedor). Puede estar vacío."""

    categoria: str | None = None
    """Categoría contable libre. Puede estar vacía."""

    @property
    def es_debito(self) -> bool:
        return self.lado == LADO_DEBITO

    @property
    def es_credito(self) -> bool:
        return self.lado == LADO_CREDITO

    @property
    def tiene_fecha_valida(self) -> bool:
        """False cuando la fecha no se pudo interpretar y el periodo es 'NaN-NaN'."""
        return self.periodo != PERIODO_INVALIDO
