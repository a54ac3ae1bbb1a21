"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from vat_calculator.domain.ports import TextSource, RecordParser, OutputWriter
"""

from vat_calculator.domain.ports.output_writer import OutputWriter
from vat_calculator.domain.ports.process_logger import ProcessLogger
from vat_calculator.domain.ports.record_parser import RecordParser
from vat_calculator.domain.ports.text_source import TextSource

__all__ = [
    "OutputWriter",
    "ProcessLogger",
    "RecordParser",
    "TextSource",
]
