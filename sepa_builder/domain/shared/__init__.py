"""
Utilidades compartidas del dominio.

Estas funciones son usadas por los modelos y por los DOM builders y no
dependen de ninguna librería externa. Solo operan sobre tipos nativos de
Python.

Uso:
    from sepa_builder.domain.shared.money import format_cents, to_cents
    from sepa_builder.domain.shared.text_cleaner import sanitize_string
    from sepa_builder.domain.shared.sepa_codes import SERVICE_LEVELS
"""
