"""
Servicio de dominio: Facade para armar un archivo SEPA completo.

Orquesta el armado a partir de diccionarios simples:
1. add_payment_info(nombre, {...}) crea un PaymentInformation, aplica los
   ajustes con los setters validados y lo agrega al TransferFile.
2. add_transfer(nombre, {...}) crea la transferencia del tipo correcto y la
   agrega al bloque con ese nombre.
3. as_xml() valida el archivo, pide un DomBuilder al registro, recorre el
   documento y devuelve el XML.

Los nombres de pago son locales al facade (no viajan al XML); sirven para
que el llamador agregue transferencias sin guardar referencias a los
bloques.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal

from sepa_builder.domain.exceptions import (
    InvalidTransferFileConfigurationError,
    InvalidTransferTypeError,
)
from sepa_builder.domain.models.payment_information import PaymentInformation
from sepa_builder.domain.models.transfer_file import TransferFile
from sepa_builder.domain.models.transfer_information import (
    CreditTransferInformation,
    DirectDebitInformation,
    TransferInformation,
)
from sepa_builder.domain.ports.assembly_logger import AssemblyLogger
from sepa_builder.domain.shared.money import to_cents
from sepa_builder.domain.shared.sepa_codes import DEFAULT_CURRENCY
from sepa_builder.infrastructure.registry import DomBuilderRegistry

# Ajustes opcionales que se aplican con los setters del bloque.
_OPTIONAL_SETTINGS: tuple[str, ...] = (
    "due_date_format",
    "batch_booking",
    "instruction_priority",
    "service_level",
    "local_instrument_code",
    "category_purpose_code",
    "schema_name",
    "country",
    "origin_bank_party_identification",
    "origin_bank_party_identification_scheme",
)


def _parse_date(value: date | str) -> date:
    """Acepta date/datetime o texto ISO 'YYYY-MM-DD'."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


class TransferFileFacade(ABC):
    """Base de los facades. Recibe sus dependencias por constructor."""

    def __init__(
        self,
        transfer_file: TransferFile,
        builder_registry: DomBuilderRegistry,
        logger: AssemblyLogger,
    ) -> None:
        """
        Args:
            transfer_file: Archivo vacío (con su GroupHeader) a llenar.
            builder_registry: Registro que entrega el DomBuilder del archivo.
            logger: Bitácora de eventos de armado.
        """
        self._transfer_file = transfer_file
        self._registry = builder_registry
        self._logger = logger
        self._payments: dict[str, PaymentInformation] = {}

    @property
    def transfer_file(self) -> TransferFile:
        return self._transfer_file

    def add_payment_info(self, payment_name: str, info: dict) -> PaymentInformation:
        """Crea un bloque de pago y lo agrega al archivo.

        Args:
            payment_name: Nombre local del bloque, único dentro del facade.
            info: Datos del bloque. Las claves obligatorias dependen de la
                  subclase; las opcionales comunes son: due_date,
                  due_date_format, batch_booking, instruction_priority,
                  service_level, local_instrument_code,
                  category_purpose_code, schema_name, country,
                  origin_bank_party_identification(_scheme),
                  hide_origin_account_iban, hide_general_settings.

        Raises:
            InvalidTransferFileConfigurationError: Nombre repetido o falta
                un campo obligatorio.
            InvalidConfigurationError: Un ajuste está fuera de su catálogo.
        """
        if payment_name in self._payments:
            raise InvalidTransferFileConfigurationError(
                f"Ya existe un pago con el nombre '{payment_name}'"
            )

        payment = self._create_payment(info)
        if "due_date" in info:
            payment.due_date = _parse_date(info["due_date"])
        for setting in _OPTIONAL_SETTINGS:
            if info.get(setting) is not None:
                setattr(payment, setting, info[setting])
        if info.get("hide_origin_account_iban"):
            payment.hide_origin_account_iban()
        if info.get("hide_general_settings"):
            payment.hide_general_settings()

        self._transfer_file.add_payment_information(payment)
        self._payments[payment_name] = payment
        self._logger.log_payment_added(payment_name, payment.id)
        return payment

    def add_transfer(self, payment_name: str, info: dict) -> TransferInformation:
        """Crea una transferencia y la agrega al bloque `payment_name`.

        El monto se indica como `amount_cents` (int) o como `amount`
        (Decimal o texto en euros, por ejemplo "12.34").

        Raises:
            InvalidTransferFileConfigurationError: El pago no existe o falta
                un campo obligatorio.
        """
        if payment_name not in self._payments:
            raise InvalidTransferFileConfigurationError(
                f"No existe un pago con el nombre '{payment_name}'"
            )
        payment = self._payments[payment_name]
        transfer = self._create_transfer(info, payment)
        payment.add_transfer(transfer)
        self._logger.log_transfer_added(payment_name, transfer.end_to_end_id, transfer.transfer_amount)
        return transfer

    def as_xml(self) -> str:
        """Valida el archivo y devuelve el documento XML.

        Cada llamada genera el documento con un DomBuilder nuevo, así que
        refleja las transferencias agregadas hasta ese momento.

        Raises:
            InvalidTransferFileConfigurationError: El archivo no cumple
                alguna regla global.
            InvalidTransferTypeError: Hay transferencias de otro tipo.
        """
        try:
            self._transfer_file.validate()
        except (InvalidTransferFileConfigurationError, InvalidTransferTypeError) as e:
            self._logger.log_validation_failed(e)
            raise

        builder = self._registry.create(self._transfer_file)
        self._transfer_file.accept(builder)
        xml = builder.as_xml()

        self._logger.log_document_built(
            self._transfer_file.group_header.message_identification,
            self._transfer_file.number_of_transactions,
            self._transfer_file.control_sum_cents,
        )
        return xml

    # =================================================================
    # Construcción específica de cada tipo de archivo
    # =================================================================

    @abstractmethod
    def _create_payment(self, info: dict) -> PaymentInformation:
        ...

    @abstractmethod
    def _create_transfer(self, info: dict, payment: PaymentInformation) -> TransferInformation:
        ...

    @staticmethod
    def _required(info: dict, key: str) -> object:
        if info.get(key) in (None, ""):
            raise InvalidTransferFileConfigurationError(f"Falta el campo obligatorio '{key}'")
        return info[key]

    @staticmethod
    def _amount_cents(info: dict) -> int:
        if info.get("amount_cents") is not None:
            return info["amount_cents"]
        if info.get("amount") is None:
            raise InvalidTransferFileConfigurationError(
                "Falta el monto: se espera 'amount_cents' o 'amount'"
            )
        amount = info["amount"]
        if isinstance(amount, int) and not isinstance(amount, bool):
            amount = Decimal(amount)
        return to_cents(amount)


class CustomerCreditFacade(TransferFileFacade):
    """Facade de transferencias (pain.001).

    Claves de add_payment_info: id, debtor_name, debtor_account_iban,
    debtor_agent_bic (opcional), debtor_account_currency (opcional).

    Claves de add_transfer: amount | amount_cents, creditor_iban,
    creditor_bic (opcional), creditor_name, end_to_end_id (opcional, por
    defecto el PmtInfId más un consecutivo), remittance_information,
    creditor_reference, instruction_id, currency, country.
    """

    def _create_payment(self, info: dict) -> PaymentInformation:
        return PaymentInformation(
            self._required(info, "id"),
            self._required(info, "debtor_account_iban"),
            info.get("debtor_agent_bic") or "",
            self._required(info, "debtor_name"),
            info.get("debtor_account_currency") or DEFAULT_CURRENCY,
        )

    def _create_transfer(self, info: dict, payment: PaymentInformation) -> TransferInformation:
        return CreditTransferInformation(
            amount_cents=self._amount_cents(info),
            iban=self._required(info, "creditor_iban"),
            bic=info.get("creditor_bic") or "",
            name=self._required(info, "creditor_name"),
            end_to_end_id=info.get("end_to_end_id")
            or f"{payment.id}-{payment.number_of_transactions + 1}",
            remittance_information=info.get("remittance_information") or "",
            creditor_reference=info.get("creditor_reference") or "",
            instruction_id=info.get("instruction_id") or "",
            currency=info.get("currency") or payment.origin_account_currency,
            country=info.get("country") or "",
        )


class CustomerDirectDebitFacade(TransferFileFacade):
    """Facade de domiciliaciones (pain.008).

    Claves de add_payment_info: id, creditor_name, creditor_account_iban,
    creditor_agent_bic (opcional), creditor_id, sequence_type,
    local_instrument_code (por defecto CORE), mandate_sign_date (opcional).

    Claves de add_transfer: amount | amount_cents, debtor_iban,
    debtor_bic (opcional), debtor_name, debtor_mandate, debtor_mandate_sign_date,
    end_to_end_id (opcional), remittance_information, instruction_id,
    original_mandate_id, original_debtor_iban, currency.
    """

    def add_payment_info(self, payment_name: str, info: dict) -> PaymentInformation:
        info = {"local_instrument_code": "CORE", **info}
        return super().add_payment_info(payment_name, info)

    def _create_payment(self, info: dict) -> PaymentInformation:
        payment = PaymentInformation(
            self._required(info, "id"),
            self._required(info, "creditor_account_iban"),
            info.get("creditor_agent_bic") or "",
            self._required(info, "creditor_name"),
            info.get("creditor_account_currency") or DEFAULT_CURRENCY,
        )
        payment.creditor_id = self._required(info, "creditor_id")
        payment.sequence_type = self._required(info, "sequence_type")
        if info.get("mandate_sign_date") is not None:
            payment.mandate_sign_date = _parse_date(info["mandate_sign_date"])
        return payment

    def _create_transfer(self, info: dict, payment: PaymentInformation) -> TransferInformation:
        sign_date = info.get("debtor_mandate_sign_date")
        return DirectDebitInformation(
            amount_cents=self._amount_cents(info),
            iban=self._required(info, "debtor_iban"),
            bic=info.get("debtor_bic") or "",
            name=self._required(info, "debtor_name"),
            mandate_id=self._required(info, "debtor_mandate"),
            mandate_sign_date=_parse_date(sign_date) if sign_date is not None else None,
            end_to_end_id=info.get("end_to_end_id")
            or f"{payment.id}-{payment.number_of_transactions + 1}",
            remittance_information=info.get("remittance_information") or "",
            instruction_id=info.get("instruction_id") or "",
            original_mandate_id=info.get("original_mandate_id") or "",
            original_debtor_iban=info.get("original_debtor_iban") or "",
            currency=info.get("currency") or payment.origin_account_currency,
        )
