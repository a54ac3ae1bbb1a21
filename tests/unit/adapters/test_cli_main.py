"""
Tests del CLI (vat_calculator.cli.main) de punta a punta sobre tmp_path.
"""

import pytest

from vat_calculator.cli.main import main

CSV = (
    "emitted at,side,amount,vat amount,counterparty name,category\n"
    "2024-03-05,credit,600,100,Dupont SARL,Ventes\n"
    "2024-03-20,debit,180,30,OVH,Hosting\n"
    "2024-02-14,debit,120,20,Free,Télécom\n"
)


@pytest.fixture
def export_csv(tmp_path):
    archivo = tmp_path / "export.csv"
    archivo.write_text(CSV, encoding="utf-8")
    return archivo


class TestMain:
    def test_periodo_por_defecto(self, export_csv, capsys):
        main([str(export_csv)])

        salida = capsys.readouterr().out
        assert "IVA: marzo de 2024" in salida
        assert "= 70,00 €" in salida
        assert "RESUMEN DE PROCESAMIENTO" in salida

    def test_periodo_explicito_con_credito(self, export_csv, capsys):
        main([str(export_csv), "-p", "2024-02"])

        salida = capsys.readouterr().out
        assert "IVA: febrero de 2024" in salida
        assert "Crédito de IVA:" in salida

    def test_listar_periodos(self, export_csv, capsys):
        main([str(export_csv), "--listar-periodos"])

        salida = capsys.readouterr().out
        assert "* 2024-03" in salida
        assert "  2024-02" in salida
        assert "IVA repercutido:" not in salida

    def test_periodo_mal_formado_avisa(self, export_csv, capsys):
        main([str(export_csv), "-p", "marzo"])

        salida = capsys.readouterr().out
        assert "no tiene forma YYYY-MM" in salida
        assert "Transacciones del periodo: 0" in salida

    def test_genera_excel(self, export_csv, tmp_path, capsys):
        main([
            str(export_csv),
            "-o", str(tmp_path / "marzo.xlsx"),
            "--resumen-general", str(tmp_path / "general.xlsx"),
        ])

        assert (tmp_path / "marzo.xlsx").exists()
        assert (tmp_path / "general.xlsx").exists()
        assert "Excel generado" in capsys.readouterr().out

    def test_archivo_inexistente_sale_con_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "no_existe.csv")])
        assert exc_info.value.code == 1

    def test_archivo_sin_transacciones_sale_con_error(self, tmp_path, capsys):
        archivo = tmp_path / "vacio.csv"
        archivo.write_text("emitted at,side\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main([str(archivo)])
        assert exc_info.value.code == 1
        assert "no contiene transacciones" in capsys.readouterr().out

    def test_delimitador_invalido(self, export_csv):
        with pytest.raises(SystemExit) as exc_info:
            main([str(export_csv), "-d", ";;"])
        assert exc_info.value.code == 2

    def test_modo_original(self, export_csv, capsys):
        main([str(export_csv), "--modo-original"])
        assert "csv-ingenuo" in capsys.readouterr().out

    def test_salida_excel_invalida_sale_con_error(self, export_csv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(export_csv), "-o", str(export_csv / "sub" / "r.xlsx")])
        assert exc_info.value.code == 1
        assert "Archivos con error:      1" in capsys.readouterr().out
