"""
Modelo de dominio: Diagnóstico de la ingesta de un archivo.

El parser nunca falla por datos de mala calidad, pero tampoco debe
esconderlos. Este modelo cuenta lo que se absorbió en silencio para que
la bitácora pueda reportarlo:

- Filas sin fecha → se descartan (no se pueden asignar a un periodo).
- Filas con fecha ilegible → se conservan bajo el periodo 'NaN-NaN',
  separadas de los periodos reales.
- Columnas requeridas ausentes → sus campos quedan en None en cada fila.
- Filas con comillas mal formadas → se dividen sin respetar comillas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticoIngesta:
    """Conteos de filas y columnas problemáticas de una ingesta."""

    filas_leidas: int = 0
    """Filas de datos no vacías encontradas después del encabezado."""

    filas_sin_fecha: int = 0
    """Filas descartadas porque la celda de fecha estaba vacía."""

    filas_fecha_invalida: int = 0
    """Filas conservadas con periodo 'NaN-NaN'."""

    columnas_faltantes: tuple[str, ...] = ()
    """Nombres de encabezado requeridos que no aparecen en el archivo."""

    filas_recuperadas: int = 0
    """Filas con comillas mal formadas, divididas sin respetar comillas."""

    @property
    def tiene_advertencias(self) -> bool:
        return bool(
            self.filas_sin_fecha
            or self.filas_fecha_invalida
            or self.columnas_faltantes
            or self.filas_recuperadas
        )
