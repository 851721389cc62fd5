"""
Modelo de dominio: Bloque de información de pago (PmtInf).

Un PaymentInformation agrupa las transferencias que comparten una misma
cuenta del ordenante, fecha de ejecución, método de pago y reglas de
secuencia. Es la unidad que el banco procesa como lote.

Responsabilidades:
1. Guardar la configuración del lote, validando cada campo enumerado
   contra su catálogo SEPA en el momento de asignarlo.
2. Mantener los agregados del lote: número de transacciones y total de
   control en centavos. Solo cambian al agregar una transferencia.
3. Recorrerse a sí mismo y a sus transferencias con un DomBuilder:
   primero el bloque, luego cada transferencia en orden de inserción.

Los agregados solo crecen (no hay forma de quitar una transferencia), así
que las propiedades derivadas siempre reflejan el estado actual.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import TYPE_CHECKING

from sepa_builder.domain.exceptions import InvalidConfigurationError
from sepa_builder.domain.models.transfer_information import TransferInformation
from sepa_builder.domain.shared.sepa_codes import (
    DEFAULT_CURRENCY,
    DEFAULT_DUE_DATE_FORMAT,
    DEFAULT_SCHEMA_NAME,
    DEFAULT_SERVICE_LEVEL,
    INSTRUCTION_PRIORITIES,
    LOCAL_INSTRUMENT_CODES,
    SCHEMA_NAMES,
    SERVICE_LEVELS,
)
from sepa_builder.domain.shared.text_cleaner import sanitize_string

if TYPE_CHECKING:
    from sepa_builder.domain.ports.dom_builder import DomBuilder


class SequenceType:
    """Tipos de secuencia de un mandato de domiciliación (SeqTp).

    Son etiquetas mutuamente excluyentes que el llamador elige para cada
    cobro; el bloque no transita entre ellas.
    """

    FIRST = "FRST"
    """Primer cobro de una serie recurrente."""

    RECURRING = "RCUR"
    """Cobro posterior de una serie recurrente."""

    ONEOFF = "OOFF"
    """Cobro único, no recurrente."""

    FINAL = "FNAL"
    """Último cobro de una serie recurrente."""

    ALL: tuple[str, ...] = (FIRST, RECURRING, ONEOFF, FINAL)


def _validate_code(campo: str, value: object, validos: Iterable[str]) -> str:
    """Normaliza a mayúsculas y verifica contra el catálogo.

    Raises:
        InvalidConfigurationError: Si el valor no es texto o no está en el catálogo.
    """
    validos = tuple(validos)
    if not isinstance(value, str):
        raise InvalidConfigurationError(campo, value, validos)
    candidate = value.upper()
    if candidate not in validos:
        raise InvalidConfigurationError(campo, candidate, validos)
    return candidate


class PaymentInformation:
    """Bloque PmtInf de un archivo SEPA.

    Ejemplo:
        >>> pago = PaymentInformation("PAY-1", "FR7630006000011234567890189", "AGRIFRPP", "ACME")
        >>> pago.set_valid_payment_methods(["TRF"])
        >>> pago.payment_method = "trf"
        >>> pago.payment_method
        'TRF'
    """

    def __init__(
        self,
        id: str,
        origin_account_iban: str,
        origin_agent_bic: str,
        origin_name: str,
        origin_account_currency: str = DEFAULT_CURRENCY,
        valid_payment_methods: Iterable[str] | None = None,
    ) -> None:
        """
        Args:
            id: Identificador del bloque, único dentro del archivo. La
                unicidad es responsabilidad del llamador.
            origin_account_iban: IBAN de la cuenta propia (deudor en
                transferencias, acreedor en domiciliaciones).
            origin_agent_bic: BIC del banco propio. Puede ser vacío.
            origin_name: Nombre propio. Se sanitiza.
            origin_account_currency: Moneda ISO 4217 de la cuenta.
            valid_payment_methods: Métodos de pago admitidos. Normalmente los
                inyecta el TransferFile dueño del bloque.
        """
        self.id = id
        self.origin_account_iban = origin_account_iban
        self.origin_agent_bic = origin_agent_bic
        self._origin_name = sanitize_string(origin_name)
        self.origin_account_currency = origin_account_currency

        self.due_date: date = datetime.now()
        self.due_date_format: str = DEFAULT_DUE_DATE_FORMAT
        self.category_purpose_code: str | None = None
        self.mandate_sign_date: date | None = None
        self.country: str | None = None

        self._origin_bank_party_identification: str | None = None
        self._origin_bank_party_identification_scheme: str | None = None
        self._creditor_id: str | None = None

        self._valid_payment_methods: tuple[str, ...] = ()
        self._payment_method: str | None = None
        self._local_instrument_code: str | None = None
        self._instruction_priority: str | None = None
        self._service_level: str = DEFAULT_SERVICE_LEVEL
        self._schema_name: str = DEFAULT_SCHEMA_NAME
        self._sequence_type: str | None = None
        self._batch_booking: bool | None = None

        self._hide_origin_account_iban = False
        self._hide_general_settings = False

        self._transfers: list[TransferInformation] = []
        self._number_of_transactions = 0
        self._control_sum_cents = 0

        if valid_payment_methods is not None:
            self.set_valid_payment_methods(valid_payment_methods)

    # =================================================================
    # Transferencias y agregados
    # =================================================================

    def add_transfer(self, transfer: TransferInformation) -> None:
        """Agrega una transferencia al final del bloque.

        Actualiza en el mismo paso el número de transacciones y el total de
        control. No hay operación inversa: para quitar una transferencia hay
        que reconstruir el bloque.
        """
        self._transfers.append(transfer)
        self._number_of_transactions += 1
        self._control_sum_cents += transfer.transfer_amount

    @property
    def transfers(self) -> tuple[TransferInformation, ...]:
        """Transferencias en orden de inserción (vista de solo lectura)."""
        return tuple(self._transfers)

    @property
    def number_of_transactions(self) -> int:
        return self._number_of_transactions

    @property
    def control_sum_cents(self) -> int:
        """Suma exacta de los montos de las transferencias, en centavos."""
        return self._control_sum_cents

    def accept(self, builder: "DomBuilder") -> None:
        """Recorre el bloque con un DomBuilder.

        Primero se visita el bloque (una sola vez) y luego cada transferencia,
        en orden de inserción, decide qué método del builder invocar.
        """
        builder.visit_payment_information(self)
        for transfer in self._transfers:
            transfer.accept(builder)

    # =================================================================
    # Setters validados contra catálogos SEPA
    # =================================================================

    @property
    def valid_payment_methods(self) -> tuple[str, ...]:
        return self._valid_payment_methods

    def set_valid_payment_methods(self, methods: Iterable[str]) -> None:
        """Define el universo de métodos de pago admitidos.

        No valida nada: solo fija contra qué se comparará `payment_method`.
        Un texto suelto ("TRF") cuenta como un solo método.
        """
        if isinstance(methods, str):
            methods = (methods,)
        self._valid_payment_methods = tuple(method.upper() for method in methods)

    @property
    def payment_method(self) -> str | None:
        return self._payment_method

    @payment_method.setter
    def payment_method(self, method: str) -> None:
        # Sin métodos válidos configurados, cualquier valor se rechaza.
        self._payment_method = _validate_code(
            "payment_method", method, self._valid_payment_methods
        )

    @property
    def local_instrument_code(self) -> str | None:
        return self._local_instrument_code

    @local_instrument_code.setter
    def local_instrument_code(self, code: str) -> None:
        self._local_instrument_code = _validate_code(
            "local_instrument_code", code, LOCAL_INSTRUMENT_CODES
        )

    @property
    def instruction_priority(self) -> str | None:
        return self._instruction_priority

    @instruction_priority.setter
    def instruction_priority(self, priority: str) -> None:
        self._instruction_priority = _validate_code(
            "instruction_priority", priority, INSTRUCTION_PRIORITIES
        )

    @property
    def service_level(self) -> str:
        return self._service_level

    @service_level.setter
    def service_level(self, level: str) -> None:
        self._service_level = _validate_code("service_level", level, SERVICE_LEVELS)

    @property
    def schema_name(self) -> str:
        """'IBAN' o 'BBAN': cómo se identifica la cuenta propia en el XML."""
        return self._schema_name

    @schema_name.setter
    def schema_name(self, name: str) -> None:
        self._schema_name = _validate_code("schema_name", name, SCHEMA_NAMES)

    @property
    def sequence_type(self) -> str | None:
        return self._sequence_type

    @sequence_type.setter
    def sequence_type(self, sequence_type: str) -> None:
        self._sequence_type = _validate_code("sequence_type", sequence_type, SequenceType.ALL)

    @property
    def batch_booking(self) -> bool | None:
        """None = no se informa; True/False = BtchBookg en el XML."""
        return self._batch_booking

    @batch_booking.setter
    def batch_booking(self, batch_booking: bool | None) -> None:
        self._batch_booking = None if batch_booking is None else bool(batch_booking)

    # =================================================================
    # Campos de texto libre (sanitizados)
    # =================================================================

    @property
    def origin_name(self) -> str:
        return self._origin_name

    @origin_name.setter
    def origin_name(self, name: str) -> None:
        self._origin_name = sanitize_string(name)

    @property
    def origin_bank_party_identification(self) -> str | None:
        """Identificación de la organización asignada por una institución."""
        return self._origin_bank_party_identification

    @origin_bank_party_identification.setter
    def origin_bank_party_identification(self, identification: str) -> None:
        self._origin_bank_party_identification = sanitize_string(identification)

    @property
    def origin_bank_party_identification_scheme(self) -> str | None:
        """Código (1 a 4 caracteres) del esquema de la identificación anterior."""
        return self._origin_bank_party_identification_scheme

    @origin_bank_party_identification_scheme.setter
    def origin_bank_party_identification_scheme(self, scheme: str) -> None:
        self._origin_bank_party_identification_scheme = sanitize_string(scheme)

    @property
    def creditor_id(self) -> str | None:
        """Identificador de acreedor SEPA. Obligatorio en domiciliaciones."""
        return self._creditor_id

    @creditor_id.setter
    def creditor_id(self, creditor_id: str) -> None:
        self._creditor_id = sanitize_string(creditor_id)

    # =================================================================
    # Fecha de ejecución
    # =================================================================

    @property
    def formatted_due_date(self) -> str:
        """Fecha de ejecución formateada con `due_date_format` (strftime)."""
        return self.due_date.strftime(self.due_date_format)

    # =================================================================
    # Banderas de ocultamiento (solo se encienden)
    # =================================================================

    def hide_origin_account_iban(self) -> None:
        """Pide al builder que no emita la cuenta propia."""
        self._hide_origin_account_iban = True

    @property
    def has_hidden_origin_account_iban(self) -> bool:
        return self._hide_origin_account_iban

    def hide_general_settings(self) -> None:
        """Pide al builder que no emita PmtTpInf (nivel de servicio, prioridad...)."""
        self._hide_general_settings = True

    @property
    def has_hidden_general_settings(self) -> bool:
        return self._hide_general_settings

    def __repr__(self) -> str:
        return (
            f"PaymentInformation(id={self.id!r}, payment_method={self._payment_method!r}, "
            f"number_of_transactions={self._number_of_transactions}, "
            f"control_sum_cents={self._control_sum_cents})"
        )
