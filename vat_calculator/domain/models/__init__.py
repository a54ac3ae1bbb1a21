"""
Modelos de dominio del proyecto vat-calculator.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from vat_calculator.domain.models import Transaccion, ResultadoIngesta, ResumenIVA
"""

from vat_calculator.domain.models.diagnostico_ingesta import DiagnosticoIngesta
from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta
from vat_calculator.domain.models.resumen_iva import ResumenIVA
from vat_calculator.domain.models.transaccion import (
    LADO_CREDITO,
    LADO_DEBITO,
    Transaccion,
)

__all__ = [
    "DiagnosticoIngesta",
    "LADO_CREDITO",
    "LADO_DEBITO",
    "ResultadoIngesta",
    "ResumenIVA",
    "Transaccion",
]
