"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto de una exportación antes
de que el parser lo divida en filas y celdas. No tienen lógica de negocio
(no saben de IVA ni de columnas); solo operan sobre strings.
"""

BOM = "\ufeff"


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Las hojas exportadas desde Windows usan \\r\\n y algunas herramientas
    antiguas \\r solo.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_bom(text: str) -> str:
    """Elimina la marca BOM inicial que Excel agrega al guardar CSV UTF-8.

    Sin esto, el primer encabezado sería '\\ufeffemitted at' y no
    coincidiría con el nombre de columna esperado.
    """
    return text[1:] if text.startswith(BOM) else text


def clean_cell(value: str, remove_all_quotes: bool = False) -> str:
    """Quita espacios y comillas dobles alrededor de una celda.

    Con remove_all_quotes=True elimina TODAS las comillas dobles de la
    celda, no solo las de los extremos (comportamiento de la división
    ingenua de la versión web).

    Ejemplos:
        >>> clean_cell('  "123.45" ')
        '123.45'
        >>> clean_cell('"ACME "Paris""', remove_all_quotes=True)
        'ACME Paris'
    """
    if remove_all_quotes:
        return value.strip().replace('"', "")
    return value.strip().strip('"').strip()


def clean_csv_text(text: str) -> str:
    """Aplica las limpiezas comunes en secuencia: BOM y saltos de línea."""
    text = strip_bom(text)
    text = normalize_line_endings(text)
    return text
