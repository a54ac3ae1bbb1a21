"""
Modelo de dominio: Resultado completo de la ingesta de una exportación.

Este es el objeto que fluye entre el parser y la presentación:
- Lo PRODUCE el RecordParser (adaptador de entrada).
- Lo CONSUME el agregador de periodos para calcular cada ResumenIVA.
- Lo REGISTRA el ProcessLogger (conteos y diagnóstico).

Se crea una vez por archivo y se reemplaza completo al volver a cargar;
no hay actualizaciones parciales.
"""

from dataclasses import dataclass, field

from vat_calculator.domain.models.diagnostico_ingesta import DiagnosticoIngesta
from vat_calculator.domain.models.transaccion import Transaccion


@dataclass(frozen=True)
class ResultadoIngesta:
    """Transacciones normalizadas más los periodos disponibles."""

    transacciones: tuple[Transaccion, ...]
    """Transacciones en el orden de las filas del archivo."""

    periodos: tuple[str, ...]
    """Periodos distintos presentes, del más reciente al más antiguo."""

    periodo_por_defecto: str | None
    """Primer elemento de `periodos`, o None si no hay transacciones."""

    diagnostico: DiagnosticoIngesta = field(default_factory=DiagnosticoIngesta)
    """Conteos de filas descartadas, fechas inválidas y columnas ausentes."""

    archivo_origen: str = ""
    """Nombre del archivo original. Vacío si el texto no vino de un archivo."""

    @property
    def esta_vacio(self) -> bool:
        """True cuando no hay nada que resumir (estado "sin datos")."""
        return not self.transacciones

    @property
    def num_transacciones(self) -> int:
        return len(self.transacciones)

    def __post_init__(self) -> None:
        if self.periodo_por_defecto is not None and self.periodo_por_defecto not in self.periodos:
            raise ValueError(
                f"periodo_por_defecto '{self.periodo_por_defecto}' no está entre los periodos"
            )
