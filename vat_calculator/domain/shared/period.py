"""
Claves de periodo contable ('YYYY-MM').

El periodo es la unidad de agrupación del cálculo de IVA: una declaración
por mes calendario. Se deriva de la fecha de emisión de cada transacción.

Si la fecha no se puede interpretar, la transacción NO se descarta: recibe
la clave literal 'NaN-NaN' y queda agrupada aparte de los periodos reales.
Esa clave se puede seleccionar y resumir como cualquier otra.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from vat_calculator.domain.shared.date_parser import parse_emission_date

if TYPE_CHECKING:
    from vat_calculator.domain.models.transaccion import Transaccion

PERIODO_INVALIDO = "NaN-NaN"


def period_key(date_text: str) -> str:
    """Deriva la clave 'YYYY-MM' de una fecha de emisión.

    Nunca lanza excepción: cualquier fecha ilegible produce 'NaN-NaN'.

    Ejemplos:
        >>> period_key("2024-03-15 10:23:45")
        '2024-03'
        >>> period_key("no es fecha")
        'NaN-NaN'
    """
    try:
        fecha = parse_emission_date(date_text)
    except ValueError:
        return PERIODO_INVALIDO
    return f"{fecha.year}-{fecha.month:02d}"


def period_keys(transacciones: Iterable["Transaccion"]) -> list[str]:
    """Periodos distintos presentes, ordenados de forma descendente.

    El orden lexicográfico descendente sobre 'YYYY-MM' coincide con el
    cronológico (más reciente primero). 'NaN-NaN' queda antes que los
    periodos reales porque 'N' > cualquier dígito.
    """
    return sorted({t.periodo for t in transacciones}, reverse=True)


def is_valid_period(periodo: str) -> bool:
    """True si el texto tiene forma 'YYYY-MM' con un mes entre 01 y 12."""
    if len(periodo) != 7 or periodo[4] != "-":
        return False
    year, month = periodo[:4], periodo[5:]
    if not (year.isdigit() and month.isdigit()):
        return False
    return 1 <= int(month) <= 12
