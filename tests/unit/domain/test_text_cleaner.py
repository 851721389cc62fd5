"""
Tests para sepa_builder.domain.shared.text_cleaner

El banco rechaza el archivo completo si un nombre o concepto trae un
carácter fuera del juego SEPA, así que cada caso viene de un nombre real
con acentos, símbolos o espacios de más.
"""

import pytest

from sepa_builder.domain.shared.text_cleaner import (
    clean_whitespace,
    sanitize_string,
    transliterate,
    truncate,
)


class TestSanitizeString:
    """Pruebas para sanitize_string."""

    @pytest.mark.parametrize(
        "entrada, esperado",
        [
            ("ACME", "ACME"),
            ("Müller GmbH", "Mueller GmbH"),
            ("Straße", "Strasse"),
            ("Société Générale", "Societe Generale"),
            ("Ñandú Ltda.", "Nandu Ltda."),
            ("Smith & Sons", "Smith + Sons"),
            ("Pago #123 (marzo)", "Pago 123 (marzo)"),
            ("a_b*c", "a b c"),
            ("  mucho     espacio  ", "mucho espacio"),
            ("línea\nnueva\tcon tab", "linea nueva con tab"),
            ("O'Brien/Ref-1?:+,.", "O'Brien/Ref-1?:+,."),
        ],
    )
    def test_casos(self, entrada, esperado):
        assert sanitize_string(entrada) == esperado

    def test_none_es_cadena_vacia(self):
        assert sanitize_string(None) == ""

    def test_solo_caracteres_invalidos(self):
        assert sanitize_string("@@@###") == ""

    def test_es_determinista(self):
        texto = "Çà et là — Øresund"
        assert sanitize_string(texto) == sanitize_string(texto)

    def test_resultado_solo_contiene_juego_sepa(self):
        permitido = set(
            "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789/-?:().,'+ "
        )
        resultado = sanitize_string("€ 10 für Kaffee ☕ @ Café «Zürich»")
        assert set(resultado) <= permitido


class TestTransliterate:
    """Pruebas para transliterate."""

    def test_dieresis_alemanas(self):
        assert transliterate("ÄÖÜäöü") == "AeOeUeaeoeue"

    def test_acentos_se_eliminan(self):
        assert transliterate("àéîõú") == "aeiou"


class TestCleanWhitespace:
    """Pruebas para clean_whitespace."""

    def test_colapsa_espacios(self):
        assert clean_whitespace("  A   B\t\tC  ") == "A B C"


class TestTruncate:
    """Pruebas para truncate."""

    def test_recorta(self):
        assert truncate("ABCDEFGH", 5) == "ABCDE"

    def test_no_deja_espacio_final(self):
        assert truncate("ABCD EFGH", 5) == "ABCD"

    def test_texto_corto_no_cambia(self):
        assert truncate("ABC", 35) == "ABC"
