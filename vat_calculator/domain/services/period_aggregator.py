"""
Servicio de dominio: Agregador de IVA por periodo.

Dado el conjunto de transacciones de una exportación y una clave de
periodo, calcula la posición neta de IVA:

    IVA repercutido = Σ monto_iva de créditos (ventas) con IVA > 0
    IVA deducible   = Σ monto_iva de débitos (compras) con IVA > 0
    IVA a pagar     = repercutido - deducible

Es una función pura e idempotente: no guarda estado entre llamadas y
cada llamada vuelve a sumar desde cero en el orden del archivo, así que
dos llamadas con los mismos argumentos dan resultados idénticos.
"""

from collections.abc import Iterable, Sequence

from vat_calculator.domain.models.resumen_iva import ResumenIVA
from vat_calculator.domain.models.transaccion import Transaccion


def summarize(transacciones: Sequence[Transaccion], periodo: str) -> ResumenIVA:
    """Calcula el ResumenIVA de un periodo.

    El filtro es igualdad exacta de strings sobre `Transaccion.periodo`,
    así que 'NaN-NaN' se puede resumir como cualquier otro periodo. Un
    periodo que no existe no es error: produce un resumen en ceros.

    Las transacciones con IVA 0 o con un lado distinto de 'debit'/'credit'
    no entran en ningún detalle, pero sí cuentan en num_transacciones.

    Args:
        transacciones: Transacciones de la ingesta, en orden del archivo.
        periodo: Clave 'YYYY-MM' (o 'NaN-NaN') a resumir.

    Returns:
        ResumenIVA nuevo.

    Ejemplos:
        >>> resumen = summarize(resultado.transacciones, "2024-03")
        >>> resumen.iva_a_pagar
        120.0
    """
    del_periodo = [t for t in transacciones if t.periodo == periodo]

    deducibles = tuple(t for t in del_periodo if t.es_debito and t.monto_iva > 0)
    repercutidas = tuple(t for t in del_periodo if t.es_credito and t.monto_iva > 0)

    iva_deducible = _sum_vat(deducibles)
    iva_repercutido = _sum_vat(repercutidas)

    return ResumenIVA(
        periodo=periodo,
        iva_deducible=iva_deducible,
        iva_repercutido=iva_repercutido,
        iva_a_pagar=iva_repercutido - iva_deducible,
        detalle_deducible=deducibles,
        detalle_repercutido=repercutidas,
        num_transacciones=len(del_periodo),
    )


def group_by_period(transacciones: Iterable[Transaccion]) -> dict[str, list[Transaccion]]:
    """Agrupa las transacciones por periodo, conservando el orden del archivo.

    Las claves aparecen en el orden en que cada periodo se vio por primera
    vez; para el orden de selección usar shared.period.period_keys().
    """
    grupos: dict[str, list[Transaccion]] = {}
    for transaccion in transacciones:
        grupos.setdefault(transaccion.periodo, []).append(transaccion)
    return grupos


def _sum_vat(transacciones: Iterable[Transaccion]) -> float:
    # Suma secuencial: sum() aplica compensación de Neumaier desde Python 3.12.
    total = 0.0
    for transaccion in transacciones:
        total += transaccion.monto_iva
    return total
