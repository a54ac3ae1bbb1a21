"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el parser, el agregador y los reportes, y
no dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python.

Uso:
    from vat_calculator.domain.shared.amount import parse_amount_safe, format_money
    from vat_calculator.domain.shared.date_parser import parse_emission_date, format_fecha
    from vat_calculator.domain.shared.period import period_key, period_keys
    from vat_calculator.domain.shared.month_map import period_label
    from vat_calculator.domain.shared.text_cleaner import clean_csv_text, clean_cell
"""
