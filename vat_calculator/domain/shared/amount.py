"""
Utilidades para montos de las exportaciones contables.

CONTEXTO DEL PROBLEMA:
Las columnas 'amount' y 'vat amount' vienen como texto y no siempre son
números limpios: celdas vacías, guiones, "N/A", texto pegado después del
número ("12.50 EUR") o directamente basura de la hoja de cálculo.

REGLA:
Nunca fallar. Se toma el prefijo numérico más largo del texto (mismo
criterio que `parseFloat` de las hojas exportadas a la web) y cualquier
cosa que no produzca un número finito se convierte en 0.0. Un monto
ilegible no debe impedir que el resto de la fila se registre.

Los montos son float: la suma del IVA se hace con aritmética de punto
flotante ordinaria y el redondeo a centavos es cosa de la presentación.
"""

import math
import re

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_MONEDAS: dict[str, str] = {
    "EUR": "€",
    "MXN": "$",
    "USD": "$",
}


def parse_amount_safe(text: str | None) -> float:
    """Convierte el texto de una celda a float, devolviendo 0.0 ante errores.

    Ejemplos:
        >>> parse_amount_safe("123.45")
        123.45
        >>> parse_amount_safe("12.5 EUR")
        12.5
        >>> parse_amount_safe("abc")
        0.0
        >>> parse_amount_safe(None)
        0.0
    """
    if text is None:
        return 0.0

    m = _NUMERIC_PREFIX.match(text.strip())
    if not m:
        return 0.0

    try:
        value = float(m.group(0))
    except ValueError:
        return 0.0

    if not math.isfinite(value):
        return 0.0
    # -0.0 se normaliza a 0.0
    return value or 0.0


def format_money(amount: float, moneda: str = "EUR") -> str:
    """Formatea un monto para mostrarlo en consola o en reportes.

    EUR usa el formato europeo (punto de miles, coma decimal, símbolo al
    final). MXN y USD usan el formato americano con símbolo al inicio.

    Ejemplos:
        >>> format_money(1234.5)
        '1.234,50 €'
        >>> format_money(-1234.5)
        '-1.234,50 €'
        >>> format_money(1234.5, "MXN")
        '$1,234.50'
    """
    moneda = moneda.upper()
    simbolo = _MONEDAS.get(moneda)
    if simbolo is None:
        raise ValueError(f"Moneda no reconocida: '{moneda}'. Esperado: {', '.join(_MONEDAS)}")

    signo = "-" if amount < 0 and round(abs(amount), 2) != 0 else ""
    americano = f"{abs(amount):,.2f}"

    if moneda == "EUR":
        europeo = americano.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"{signo}{europeo} {simbolo}"
    return f"{signo}{simbolo}{americano}"
