"""
Tests para vat_calculator.domain.shared.month_map
"""

import pytest

from vat_calculator.domain.shared.month_map import month_name, period_label


class TestMonthName:
    def test_espanol(self):
        assert month_name(3) == "marzo"

    def test_frances(self):
        assert month_name(8, "fr") == "août"

    def test_extremos(self):
        assert month_name(1) == "enero"
        assert month_name(12) == "diciembre"

    @pytest.mark.parametrize("mes", [0, 13, -1])
    def test_mes_fuera_de_rango_lanza_error(self, mes):
        with pytest.raises(ValueError, match="fuera de rango"):
            month_name(mes)

    def test_idioma_no_soportado_lanza_error(self):
        with pytest.raises(ValueError, match="no soportado"):
            month_name(3, "de")


class TestPeriodLabel:
    def test_espanol(self):
        assert period_label("2024-03") == "marzo de 2024"

    def test_frances(self):
        assert period_label("2024-03", "fr") == "mars 2024"

    def test_periodo_invalido(self):
        assert period_label("NaN-NaN") == "Fecha no válida"

    def test_periodo_invalido_frances(self):
        assert period_label("NaN-NaN", "fr") == "Date invalide"

    def test_clave_mal_formada_no_lanza_error(self):
        assert period_label("basura") == "Fecha no válida"
