"""
Utilidades de limpieza de texto para campos SEPA.

Los bancos solo aceptan el juego de caracteres latino básico de SEPA:

    a-z A-Z 0-9 / - ? : ( ) . , ' + espacio

Estas funciones NO tienen lógica de negocio (no saben de pagos ni montos).
Solo operan sobre strings puros y son deterministas.
"""

import re
import unicodedata

# Transliteraciones que NFKD no resuelve o resolvería perdiendo información
# (ä → a en vez de ae).
_TRANSLITERATIONS: dict[str, str] = {
    "Ä": "Ae",
    "ä": "ae",
    "Ö": "Oe",
    "ö": "oe",
    "Ü": "Ue",
    "ü": "ue",
    "ß": "ss",
    "Æ": "AE",
    "æ": "ae",
    "Ø": "O",
    "ø": "o",
    "Œ": "OE",
    "œ": "oe",
    "Ł": "L",
    "ł": "l",
    "&": "+",
}

_DISALLOWED = re.compile(r"[^a-zA-Z0-9/\-?:().,'+ ]")


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs/saltos por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  ACME   SARL  ")
        'ACME SARL'
    """
    return re.sub(r"\s+", " ", text).strip()


def transliterate(text: str) -> str:
    """Convierte letras acentuadas a su equivalente latino básico.

    Ejemplos:
        >>> transliterate("Müller Straße")
        'Mueller Strasse'
        >>> transliterate("Société Générale")
        'Societe Generale'
    """
    for old, new in _TRANSLITERATIONS.items():
        text = text.replace(old, new)
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def sanitize_string(text: str | None) -> str:
    """Deja un texto libre dentro del juego de caracteres SEPA.

    Secuencia:
    1. Transliterar acentos y diéresis.
    2. Reemplazar cualquier carácter fuera del juego SEPA por espacio.
    3. Colapsar espacios y hacer strip.

    None se trata como cadena vacía.

    Ejemplos:
        >>> sanitize_string("  Café  & Crème ")
        'Cafe + Creme'
        >>> sanitize_string("ACME_Corp #1")
        'ACME Corp 1'
    """
    if text is None:
        return ""
    text = transliterate(str(text))
    text = _DISALLOWED.sub(" ", text)
    return clean_whitespace(text)


def truncate(text: str, max_length: int) -> str:
    """Recorta un texto a la longitud máxima de un campo del esquema.

    Ejemplos:
        >>> truncate("ABCDEF", 4)
        'ABCD'
    """
    return text[:max_length].rstrip()
