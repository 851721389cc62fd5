"""
Excepciones de dominio del proyecto sepa-builder.

Permiten que quien arma un archivo SEPA distinga entre "el valor de un campo
no pertenece al catálogo SEPA" y "el archivo completo no se puede emitir",
y reporte al usuario qué campo o qué pago está mal.

Jerarquía:
    SepaBaseError
    ├── InvalidConfigurationError              → Valor fuera de su catálogo cerrado
    ├── InvalidTransferFileConfigurationError  → El archivo no cumple reglas globales
    └── InvalidTransferTypeError               → Transferencia de un tipo no admitido
"""

from collections.abc import Iterable


class SepaBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar CUALQUIER error del proyecto con un solo
    `except SepaBaseError`.
    """


class InvalidConfigurationError(SepaBaseError):
    """Se lanza cuando un setter validado recibe un valor fuera de su catálogo.

    Ejemplos:
    - service_level = "FOO" (válidos: SEPA, NURG).
    - payment_method = "TRF" sin haber configurado los métodos válidos.

    El valor previamente almacenado no se modifica.
    """

    def __init__(self, campo: str, valor: object, validos: Iterable[str] = ()):
        self.campo = campo
        self.valor = valor
        self.validos = tuple(validos)
        mensaje = f"Valor inválido para {campo}: '{valor}'"
        if self.validos:
            mensaje += f". Debe ser uno de: {', '.join(self.validos)}"
        else:
            mensaje += ". No hay valores válidos configurados"
        super().__init__(mensaje)


class InvalidTransferFileConfigurationError(SepaBaseError):
    """Se lanza cuando el archivo de transferencia no cumple una regla global.

    Esto puede pasar porque:
    - El archivo no tiene ningún bloque de PaymentInformation.
    - Un bloque no tiene ninguna transferencia.
    - Un bloque de domiciliación no tiene creditor_id o sequence_type.
    - Se pidió un pago por nombre que no existe (o ya existía).
    """

    def __init__(self, detalle: str, payment_id: str = ""):
        self.detalle = detalle
        self.payment_id = payment_id
        mensaje = detalle
        if payment_id:
            mensaje = f"Pago '{payment_id}': {detalle}"
        super().__init__(mensaje)


class InvalidTransferTypeError(SepaBaseError):
    """Se lanza cuando una transferencia no es del tipo que admite el archivo.

    Ejemplos:
    - Una DirectDebitInformation dentro de un archivo de transferencias.
    - Un DomBuilder de transferencias visitando una domiciliación.
    - El registro no conoce el tipo de archivo recibido.
    """

    def __init__(self, esperado: str, recibido: str):
        self.esperado = esperado
        self.recibido = recibido
        super().__init__(f"Tipo de transferencia inválido: se esperaba {esperado}, se recibió {recibido}")
