"""
Interpretación de la columna 'emitted at' de las exportaciones.

CONTEXTO DEL PROBLEMA:
Las herramientas contables exportan la fecha de emisión en formatos
distintos según la configuración regional y la versión de la exportación:

- "2024-03-15T10:23:45.000Z"   → ISO 8601 con zona UTC (Qonto)
- "2024-03-15 10:23:45"        → ISO sin 'T', hora local
- "2024-03-15"                 → solo fecha
- "2024-03"                    → solo año-mes (hojas resumidas a mano)
- "2024/03/15"                 → hojas de cálculo con barras
- "03/15/2024 10:23"           → formato americano de Google Sheets

SOLUCIÓN:
Un parser centralizado que siempre devuelve un `datetime` en hora local
o lanza ValueError. El cálculo del periodo (shared/period.py) decide qué
hacer con el error; este módulo no conoce el periodo 'NaN-NaN'.
"""

import re
from datetime import datetime


def parse_emission_date(date_text: str) -> datetime:
    """Parsea la fecha de emisión de una transacción a un datetime local.

    Formatos soportados (detectados automáticamente):
        "2024-03-15T10:23:45Z"      → ISO 8601 con zona (se convierte a hora local)
        "2024-03-15 10:23:45"       → ISO 8601 sin zona (se toma como hora local)
        "2024-03-15"                → fecha local, medianoche
        "2024-03" / "2024"          → primer día del mes / del año
        "2024/03/15"                → año primero con barras
        "03/15/2024", "03/15/2024 10:23[:45]" → mes/día/año (americano)

    Las fechas con zona horaria se convierten a la zona local del proceso
    y se devuelven sin tzinfo, para que el mes corresponda al calendario
    local del usuario.

    Args:
        date_text: Texto de la celda tal como aparece en la exportación.

    Returns:
        datetime sin tzinfo, en hora local.

    Raises:
        ValueError: Si el texto está vacío o no corresponde a ningún formato.

    Ejemplos:
        >>> parse_emission_date("2024-03-15 10:23:45")
        datetime.datetime(2024, 3, 15, 10, 23, 45)
        >>> parse_emission_date("2024-03")
        datetime.datetime(2024, 3, 1, 0, 0)
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    # --- Caso 1: Año y mes, o solo año ---
    m = re.match(r"^(\d{4})(?:-(\d{2}))?$", text)
    if m:
        month = int(m.group(2)) if m.group(2) else 1
        return _build_datetime(int(m.group(1)), month, 1, text)

    # --- Caso 2: ISO 8601 (fromisoformat acepta 'Z' y offsets) ---
    if re.match(r"^\d{4}-\d{2}-\d{2}", text):
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValueError(f"Fecha ISO inválida: '{text}' ({e})") from e
        return _to_local_naive(parsed)

    # --- Caso 3: YYYY/MM/DD ---
    m = re.match(r"^(\d{4})/(\d{1,2})/(\d{1,2})$", text)
    if m:
        return _build_datetime(int(m.group(1)), int(m.group(2)), int(m.group(3)), text)

    # --- Caso 4: MM/DD/YYYY con hora opcional ---
    m = re.match(
        r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:[ T](\d{1,2}):(\d{2})(?::(\d{2}))?)?$",
        text,
    )
    if m:
        result = _build_datetime(int(m.group(3)), int(m.group(1)), int(m.group(2)), text)
        if m.group(4):
            try:
                result = result.replace(
                    hour=int(m.group(4)),
                    minute=int(m.group(5)),
                    second=int(m.group(6) or 0),
                )
            except ValueError as e:
                raise ValueError(f"Hora inválida en fecha '{text}': {e}") from e
        return result

    raise ValueError(
        f"Formato de fecha no reconocido: '{text}'. "
        f"Formatos soportados: ISO 8601, YYYY-MM, YYYY/MM/DD, MM/DD/YYYY"
    )


def format_fecha(date_text: str) -> str:
    """Formatea una fecha de emisión como 'dd/mm/yyyy' para los reportes.

    Si la fecha no se puede interpretar se devuelve el texto original,
    para que la fila siga siendo identificable en el detalle.

    Ejemplos:
        >>> format_fecha("2024-03-05T09:00:00")
        '05/03/2024'
        >>> format_fecha("ayer")
        'ayer'
    """
    try:
        return parse_emission_date(date_text).strftime("%d/%m/%Y")
    except ValueError:
        return date_text


# ============================================================
# FUNCIONES INTERNAS (prefijo _ = no exportadas)
# ============================================================


def _to_local_naive(value: datetime) -> datetime:
    """Convierte un datetime con zona a hora local sin tzinfo.

    Cerca de los límites de datetime (año 1 o 9999) la conversión puede
    salirse del rango representable; se reporta como ValueError igual que
    cualquier otra fecha inválida.
    """
    if value.tzinfo is None:
        return value
    try:
        return value.astimezone().replace(tzinfo=None)
    except (OverflowError, ValueError) as e:
        raise ValueError(f"Fecha fuera de rango al convertir a hora local: {value} ({e})") from e


def _build_datetime(year: int, month: int, day: int, original_text: str) -> datetime:
    """Construye un datetime con un mensaje de error que incluye el texto original."""
    try:
        return datetime(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} ({e})"
        ) from e
