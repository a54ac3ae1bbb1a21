"""
Nombres de meses para mostrar periodos.

El selector de periodo y los reportes muestran "marzo de 2024" en vez de
la clave técnica "2024-03". El idioma por defecto es español; se incluye
francés porque las exportaciones de Qonto se usan con etiquetas en francés.
"""

from vat_calculator.domain.shared.period import PERIODO_INVALIDO, is_valid_period

_MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "es": (
        "enero",
        "febrero",
        "marzo",
        "abril",
        "mayo",
        "junio",
        "julio",
        "agosto",
        "septiembre",
        "octubre",
        "noviembre",
        "diciembre",
    ),
    "fr": (
        "janvier",
        "février",
        "mars",
        "avril",
        "mai",
        "juin",
        "juillet",
        "août",
        "septembre",
        "octobre",
        "novembre",
        "décembre",
    ),
}

_ETIQUETA_INVALIDA: dict[str, str] = {
    "es": "Fecha no válida",
    "fr": "Date invalide",
}


def month_name(month: int, idioma: str = "es") -> str:
    """Devuelve el nombre del mes (1-12) en el idioma indicado.

    Raises:
        ValueError: Si el mes está fuera de rango o el idioma no existe.

    Ejemplos:
        >>> month_name(3)
        'marzo'
        >>> month_name(8, "fr")
        'août'
    """
    nombres = _MONTH_NAMES.get(idioma)
    if nombres is None:
        raise ValueError(f"Idioma no soportado: '{idioma}'. Valores válidos: {sorted(_MONTH_NAMES)}")
    if not 1 <= month <= 12:
        raise ValueError(f"Mes fuera de rango: {month}. Debe ser 1-12.")
    return nombres[month - 1]


def period_label(periodo: str, idioma: str = "es") -> str:
    """Convierte una clave 'YYYY-MM' en una etiqueta legible.

    'NaN-NaN' y cualquier clave mal formada se muestran con una etiqueta
    fija en lugar de lanzar error, porque son periodos seleccionables.

    Ejemplos:
        >>> period_label("2024-03")
        'marzo de 2024'
        >>> period_label("2024-03", "fr")
        'mars 2024'
        >>> period_label("NaN-NaN")
        'Fecha no válida'
    """
    if periodo == PERIODO_INVALIDO or not is_valid_period(periodo):
        return _ETIQUETA_INVALIDA.get(idioma, _ETIQUETA_INVALIDA["es"])

    year, month = periodo.split("-")
    nombre = month_name(int(month), idioma)
    if idioma == "es":
        return f"{nombre} de {year}"
    return f"{nombre} {year}"
