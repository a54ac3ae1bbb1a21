"""
Modelo de dominio: Resumen de IVA de un periodo.

El ResumenIVA es lo que consume la capa de presentación (consola, Excel)
cuando se selecciona un periodo. Se recalcula completo en cada selección;
no se cachea ni se compara contra un resumen anterior.

Convención de signo:
    iva_a_pagar = iva_repercutido - iva_deducible
    >= 0 → se debe a la autoridad fiscal
    <  0 → crédito de IVA a favor
El valor absoluto solo se usa al mostrarlo; el campo conserva el signo.
"""

from dataclasses import dataclass

from vat_calculator.domain.models.transaccion import Transaccion


@dataclass(frozen=True)
class ResumenIVA:
    """Posición neta de IVA para un periodo 'YYYY-MM'."""

    periodo: str
    """Clave del periodo resumido. Puede ser 'NaN-NaN'."""

    iva_deducible: float
    """Suma de monto_iva de los débitos con IVA > 0 (compras)."""

    iva_repercutido: float
    """Suma de monto_iva de los créditos con IVA > 0 (ventas)."""

    iva_a_pagar: float
    """iva_repercutido - iva_deducible, sin redondear."""

    detalle_deducible: tuple[Transaccion, ...]
    """Débitos cuyo IVA se sumó, en el orden del archivo."""

    detalle_repercutido: tuple[Transaccion, ...]
    """Créditos cuyo IVA se sumó, en el orden del archivo."""

    num_transacciones: int
    """Total de transacciones del periodo, con o sin IVA."""

    @property
    def es_credito(self) -> bool:
        """True cuando el deducible supera al repercutido."""
        return self.iva_a_pagar < 0

    @property
    def num_deducibles(self) -> int:
        return len(self.detalle_deducible)

    @property
    def num_repercutidas(self) -> int:
        return len(self.detalle_repercutido)
