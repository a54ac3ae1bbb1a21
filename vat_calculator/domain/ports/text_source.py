"""
Puerto de entrada: Fuente de texto.

Define el contrato para obtener el texto crudo de una exportación.
Es la única frontera de I/O del sistema y el único lugar donde un
fallo se reporta como error explícito (archivo ilegible):

    TextSource (interfaz)
    └── FileTextSource      → archivos .csv/.txt en disco (UTF-8)
"""

from abc import ABC, abstractmethod
from pathlib import Path


class TextSource(ABC):
    """Interfaz para leer el texto de una exportación."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si esta fuente puede leer el archivo dado.

        El VatProcessor usa la primera fuente cuyo can_handle devuelva True.
        """
        ...

    @abstractmethod
    def read(self, file_path: Path) -> str:
        """Lee el archivo completo y devuelve su texto.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o no es soportado.
            ExtractionError: Si los bytes no se pueden leer o decodificar.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente. Para la bitácora.

        Ejemplo: 'archivo-utf8'
        """
        ...
