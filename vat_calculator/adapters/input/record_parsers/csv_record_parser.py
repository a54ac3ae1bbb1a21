"""
Adaptador de entrada: Parser de exportaciones CSV.

FORMATO:
Texto delimitado (coma por defecto), UTF-8, primera fila no vacía como
encabezado y una transacción por fila. Las columnas se localizan por
nombre exacto (sensible a mayúsculas), en cualquier orden:

    emitted at | side | amount | vat amount | counterparty name | category

Es el encabezado de las exportaciones de Qonto ("Qonto Connect" en
Google Sheets). Otras herramientas con nombres distintos se soportan
pasando un ColumnasExportacion propio.

REGLAS DE FILA:
- Líneas vacías (tras quitar espacios) → se ignoran.
- Celda de fecha vacía o ausente → la fila se descarta (sin periodo posible).
- Fecha ilegible → la fila se conserva con periodo 'NaN-NaN'.
- Montos ilegibles → 0.0, sin afectar al resto de la fila.
- Columna requerida ausente → el campo queda en None en todas las filas.

DELIMITADOR:
Por defecto se divide con el módulo `csv`, que respeta comillas: una
contraparte como "Dupont, Martin & Cie" no desalinea las columnas.
Una línea con comillas mal formadas (sin cerrar, o con texto pegado a
la comilla de cierre) no se traga el resto del archivo: esa línea sola
se divide con el criterio ingenuo y se cuenta en filas_recuperadas.
Con respetar_comillas=False se reproduce la división ingenua de la
versión web (cortar en cada delimitador y borrar todas las comillas),
útil para comparar resultados con ella.
"""

import csv
import io
from collections.abc import Iterator
from dataclasses import dataclass, fields

from vat_calculator.domain.models.diagnostico_ingesta import DiagnosticoIngesta
from vat_calculator.domain.models.resultado_ingesta import ResultadoIngesta
from vat_calculator.domain.models.transaccion import Transaccion
from vat_calculator.domain.ports.record_parser import RecordParser
from vat_calculator.domain.shared.amount import parse_amount_safe
from vat_calculator.domain.shared.period import PERIODO_INVALIDO, period_key, period_keys
from vat_calculator.domain.shared.text_cleaner import clean_cell, clean_csv_text


@dataclass(frozen=True)
class ColumnasExportacion:
    """Nombres de encabezado de cada campo lógico de la transacción."""

    fecha: str = "emitted at"
    lado: str = "side"
    monto: str = "amount"
    monto_iva: str = "vat amount"
    contraparte: str = "counterparty name"
    categoria: str = "category"

    def nombres(self) -> tuple[str, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))


COLUMNAS_QONTO = ColumnasExportacion()


class CsvRecordParser(RecordParser):
    """Convierte texto CSV en un ResultadoIngesta."""

    def __init__(
        self,
        columnas: ColumnasExportacion = COLUMNAS_QONTO,
        delimitador: str = ",",
        respetar_comillas: bool = True,
    ) -> None:
        """
        Args:
            columnas: Nombres de encabezado a buscar.
            delimitador: Un solo carácter separador de celdas.
            respetar_comillas: False reproduce la división ingenua (sin
                              soporte para delimitadores dentro de comillas).
        """
        if len(delimitador) != 1:
            raise ValueError(f"El delimitador debe ser un solo carácter: '{delimitador}'")
        self._columnas = columnas
        self._delimitador = delimitador
        self._respetar_comillas = respetar_comillas

    @property
    def format_name(self) -> str:
        return "csv" if self._respetar_comillas else "csv-ingenuo"

    def parse(self, raw_text: str, file_name: str = "") -> ResultadoIngesta:
        filas = self._split_rows(clean_csv_text(raw_text))

        primera = next(filas, None)
        if primera is None:
            return ResultadoIngesta(
                transacciones=(),
                periodos=(),
                periodo_por_defecto=None,
                archivo_origen=file_name,
            )

        encabezado = primera[0]
        indices = self._resolve_indices(encabezado)
        faltantes = tuple(nombre for nombre, idx in indices.items() if idx == -1)

        transacciones: list[Transaccion] = []
        filas_leidas = 0
        filas_sin_fecha = 0
        filas_fecha_invalida = 0
        filas_recuperadas = 0

        for valores, recuperada in filas:
            filas_leidas += 1
            if recuperada:
                filas_recuperadas += 1
            fecha = _cell(valores, indices[self._columnas.fecha])
            if not fecha:
                filas_sin_fecha += 1
                continue

            transaccion = Transaccion(
                fecha_emision=fecha,
                periodo=period_key(fecha),
                lado=_cell(valores, indices[self._columnas.lado]),
                monto=parse_amount_safe(_cell(valores, indices[self._columnas.monto])),
                monto_iva=parse_amount_safe(_cell(valores, indices[self._columnas.monto_iva])),
                contraparte=_cell(valores, indices[self._columnas.contraparte]),
                categoria=_cell(valores, indices[self._columnas.categoria]),
            )
            if transaccion.periodo == PERIODO_INVALIDO:
                filas_fecha_invalida += 1
            transacciones.append(transaccion)

        periodos = tuple(period_keys(transacciones))

        return ResultadoIngesta(
            transacciones=tuple(transacciones),
            periodos=periodos,
            periodo_por_defecto=periodos[0] if periodos else None,
            diagnostico=DiagnosticoIngesta(
                filas_leidas=filas_leidas,
                filas_sin_fecha=filas_sin_fecha,
                filas_fecha_invalida=filas_fecha_invalida,
                filas_recuperadas=filas_recuperadas,
                columnas_faltantes=faltantes,
            ),
            archivo_origen=file_name,
        )

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _resolve_indices(self, encabezado: list[str]) -> dict[str, int]:
        """Mapea cada nombre de columna requerido a su posición, o -1.

        Si un nombre aparece repetido se usa la primera aparición.
        """
        return {
            nombre: encabezado.index(nombre) if nombre in encabezado else -1
            for nombre in self._columnas.nombres()
        }

    def _split_rows(self, text: str) -> Iterator[tuple[list[str], bool]]:
        """Genera las filas no vacías ya divididas y limpias (encabezado incluido).

        Cada fila va acompañada de un indicador: True si el lector csv no
        pudo interpretarla (comilla sin cerrar, comilla seguida de texto,
        campo que excede csv.field_size_limit) y se dividió con el criterio
        ingenuo. Solo esa línea se recupera así; el lector csv se reinicia
        en la línea siguiente.
        """
        lineas = text.split("\n")
        if not self._respetar_comillas:
            for line in lineas:
                if line.strip():
                    yield self._split_naive(line), False
            return

        inicio = 0
        while inicio < len(lineas):
            reader = csv.reader(
                io.StringIO("\n".join(lineas[inicio:])),
                delimiter=self._delimitador,
                skipinitialspace=True,
                strict=True,
            )
            consumidas = 0
            try:
                for row in reader:
                    consumidas = reader.line_num
                    if not row or (len(row) == 1 and not row[0].strip()):
                        continue
                    yield [clean_cell(v) for v in row], False
                return
            except csv.Error:
                # La fila rota empieza en la primera línea no consumida
                rota = inicio + consumidas
                if rota >= len(lineas):
                    return
                if lineas[rota].strip():
                    yield self._split_naive(lineas[rota]), True
                inicio = rota + 1

    def _split_naive(self, line: str) -> list[str]:
        return [clean_cell(v, remove_all_quotes=True) for v in line.split(self._delimitador)]


def _cell(valores: list[str], idx: int) -> str | None:
    """Celda en la posición idx, o None si la columna no existe o la fila es corta."""
    if idx < 0 or idx >= len(valores):
        return None
    return valores[idx]
