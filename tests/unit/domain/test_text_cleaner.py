"""
Tests para vat_calculator.domain.shared.text_cleaner
"""

from vat_calculator.domain.shared.text_cleaner import (
    clean_cell,
    clean_csv_text,
    normalize_line_endings,
    strip_bom,
)


class TestStripBom:
    def test_quita_bom_inicial(self):
        assert strip_bom("\ufeffemitted at,side") == "emitted at,side"

    def test_sin_bom_no_cambia(self):
        assert strip_bom("emitted at,side") == "emitted at,side"


class TestNormalizeLineEndings:
    def test_windows(self):
        assert normalize_line_endings("a\r\nb\r\n") == "a\nb\n"

    def test_mac_antiguo(self):
        assert normalize_line_endings("a\rb") == "a\nb"


class TestCleanCell:
    def test_quita_comillas_y_espacios(self):
        assert clean_cell('  "123.45" ') == "123.45"

    def test_celda_sin_comillas(self):
        assert clean_cell(" credit ") == "credit"

    def test_conserva_comillas_internas(self):
        assert clean_cell('"ACME "Paris""') == 'ACME "Paris'

    def test_quitar_todas_las_comillas(self):
        assert clean_cell('"ACME "Paris""', remove_all_quotes=True) == "ACME Paris"


class TestCleanCsvText:
    def test_bom_y_saltos_de_linea(self):
        assert clean_csv_text("\ufeffa,b\r\n1,2\r\n") == "a,b\n1,2\n"
