"""
Adaptador de entrada: Lectura de exportaciones desde disco.

Lee el archivo completo en memoria como texto UTF-8. Se usa 'utf-8-sig'
por defecto para que la marca BOM que agrega Excel no termine pegada al
primer encabezado.

Es el único lugar donde un problema se reporta como error explícito:
si los bytes no se pueden leer o decodificar, no hay nada que parsear.
"""

from pathlib import Path

from vat_calculator.domain.exceptions import ExtractionError, FormatoInvalidoError
from vat_calculator.domain.ports.text_source import TextSource

EXTENSIONES_SOPORTADAS = (".csv", ".txt")


class FileTextSource(TextSource):
    """Lee exportaciones .csv/.txt desde el sistema de archivos."""

    def __init__(
        self,
        encoding: str = "utf-8-sig",
        extensiones: tuple[str, ...] = EXTENSIONES_SOPORTADAS,
    ) -> None:
        self._encoding = encoding
        self._extensiones = tuple(e.lower() for e in extensiones)

    @property
    def name(self) -> str:
        return f"archivo-{self._encoding}"

    def can_handle(self, file_path: Path) -> bool:
        """Acepta archivos por extensión; no verifica el contenido."""
        return file_path.suffix.lower() in self._extensiones

    def read(self, file_path: Path) -> str:
        """Lee el archivo completo.

        Raises:
            FormatoInvalidoError: Si la ruta no existe, es un directorio o
                                  tiene una extensión no soportada.
            ExtractionError: Si no hay permisos o el contenido no está en
                             la codificación esperada.
        """
        esperado = ", ".join(self._extensiones)
        if not file_path.is_file():
            raise FormatoInvalidoError(str(file_path), esperado, "el archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path), esperado, f"extensión '{file_path.suffix}' no soportada"
            )

        try:
            return file_path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            raise ExtractionError(
                str(file_path), f"el contenido no está en {self._encoding}: {e.reason}"
            ) from e
        except OSError as e:
            raise ExtractionError(str(file_path), str(e)) from e
