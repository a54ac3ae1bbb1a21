"""
Excepciones de dominio del proyecto vat-calculator.

El núcleo (parser y agregador) nunca lanza excepciones por problemas de
calidad de datos: celdas vacías, montos ilegibles o fechas inválidas se
absorben por coerción. Estas excepciones solo existen en la frontera de
entrada/salida, donde un archivo no se puede leer o un reporte no se
puede escribir.

Jerarquía:
    VatCalculatorError
    ├── FormatoInvalidoError    → El archivo no existe o no es una exportación soportada
    ├── ExtractionError         → No se pudieron leer/decodificar los bytes del archivo
    └── OutputError             → Error al generar el reporte de salida
"""


class VatCalculatorError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class FormatoInvalidoError(VatCalculatorError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - La ruta no existe o es un directorio.
    - La extensión no es .csv ni .txt.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class ExtractionError(VatCalculatorError):
    """Se lanza cuando falla la lectura del texto de un archivo.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - El archivo no está codificado en UTF-8.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(VatCalculatorError):
    """Se lanza cuando falla la generación del archivo de salida."""

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
