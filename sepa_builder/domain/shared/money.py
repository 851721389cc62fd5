"""
Utilidades para manejo de montos monetarios en centavos.

Todo el proyecto trabaja con enteros en unidades menores de la moneda
(centavos de euro). Los totales de control (CtrlSum) se calculan sumando
enteros, así que son exactos y reproducibles.

Solo hay dos fronteras donde se cruza a texto o a decimales:
1. Entrada: montos que llegan como "1,234.56" o Decimal("1234.56") desde
   el llamador (to_cents).
2. Salida: el DOM builder escribe "1234.56" en el XML (format_cents).
"""

from decimal import Decimal, InvalidOperation

_CENTS_PER_UNIT = 100


def to_cents(amount: Decimal | str) -> int:
    """Convierte un monto en unidades mayores (euros) a centavos enteros.

    Acepta Decimal o texto con formato monetario:
    - Sin separadores: "1234.56"
    - Con comas de miles: "1,234.56"
    - Con símbolo y espacios: " € 1,234.56 "

    No redondea: un monto con más de 2 decimales es un error del llamador.

    Raises:
        TypeError: Si el monto es float u otro tipo no soportado.
        ValueError: Si el texto no es un monto válido o tiene más de 2 decimales.

    Ejemplos:
        >>> to_cents("1,234.56")
        123456
        >>> to_cents(Decimal("10"))
        1000
    """
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, str)):
        raise TypeError(f"to_cents espera Decimal o str, recibió {type(amount).__name__}")

    if isinstance(amount, str):
        cleaned = amount.strip().replace("€", "").replace(" ", "").replace(",", "")
        if not cleaned or cleaned == "-":
            raise ValueError(f"No se pudo extraer un monto de: '{amount}'")
        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            raise ValueError(f"No se pudo convertir a monto: '{amount}' (limpio: '{cleaned}')")
    else:
        value = amount

    if not value.is_finite():
        raise ValueError(f"Monto no finito: '{amount}'")

    cents = value * _CENTS_PER_UNIT
    if cents != cents.to_integral_value():
        raise ValueError(f"El monto tiene más de 2 decimales: '{amount}'")
    return int(cents)


def format_cents(cents: int) -> str:
    """Formatea centavos enteros como importe XML con 2 decimales y punto.

    Solo usa aritmética entera (divmod), nunca float.

    Ejemplos:
        >>> format_cents(123456)
        '1234.56'
        >>> format_cents(5)
        '0.05'
        >>> format_cents(-250)
        '-2.50'
    """
    if isinstance(cents, bool) or not isinstance(cents, int):
        raise TypeError(f"format_cents espera int, recibió {type(cents).__name__}")
    sign = "-" if cents < 0 else ""
    units, rest = divmod(abs(cents), _CENTS_PER_UNIT)
    return f"{sign}{units}.{rest:02d}"

