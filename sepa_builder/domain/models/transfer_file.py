"""
Modelo de dominio: Archivo de transferencias SEPA (Document).

Un TransferFile es el agregado de nivel superior:

    TransferFile (abstracto)
    ├── CustomerCreditTransferFile    → pain.001 (transferencias)
    └── CustomerDirectDebitTransferFile → pain.008 (domiciliaciones)

Contiene un GroupHeader y uno o más bloques PaymentInformation. Cada
subclase define qué métodos de pago son legales y qué tipo de
transferencia admite; al recibir un bloque le inyecta esa lista.
"""

from abc import ABC
from typing import TYPE_CHECKING

from sepa_builder.domain.exceptions import (
    InvalidConfigurationError,
    InvalidTransferFileConfigurationError,
    InvalidTransferTypeError,
)
from sepa_builder.domain.models.group_header import GroupHeader
from sepa_builder.domain.models.payment_information import PaymentInformation
from sepa_builder.domain.models.transfer_information import (
    CreditTransferInformation,
    DirectDebitInformation,
    TransferInformation,
)
from sepa_builder.domain.shared.sepa_codes import (
    CREDIT_TRANSFER_PAYMENT_METHODS,
    DEFAULT_CREDIT_TRANSFER_PAYMENT_METHOD,
    DEFAULT_DIRECT_DEBIT_PAYMENT_METHOD,
    DIRECT_DEBIT_PAYMENT_METHODS,
)

if TYPE_CHECKING:
    from sepa_builder.domain.ports.dom_builder import DomBuilder


class TransferFile(ABC):
    """Base de los archivos SEPA. Las subclases fijan los atributos de clase."""

    payment_method: str
    """Método de pago que se asigna a los bloques que no tienen uno."""

    valid_payment_methods: tuple[str, ...]
    """Métodos de pago legales para este tipo de archivo."""

    transfer_type: type[TransferInformation]
    """Tipo de transferencia que admiten los bloques de este archivo."""

    def __init__(self, group_header: GroupHeader) -> None:
        self.group_header = group_header
        self._payment_informations: list[PaymentInformation] = []

    def add_payment_information(self, payment_information: PaymentInformation) -> None:
        """Agrega un bloque al archivo.

        Le inyecta los métodos de pago legales del archivo y, si el bloque
        aún no tiene método, le asigna el de por defecto. Un método asignado
        antes se valida contra la lista del archivo. Si algo falla, el
        bloque queda como estaba.

        Raises:
            InvalidTransferFileConfigurationError: Si el bloque ya está en
                el archivo.
            InvalidConfigurationError: Si el método del bloque no es legal
                para este tipo de archivo.
        """
        if any(p is payment_information for p in self._payment_informations):
            raise InvalidTransferFileConfigurationError(
                "El bloque ya fue agregado al archivo", payment_information.id
            )

        method = payment_information.payment_method or self.payment_method
        if method.upper() not in self.valid_payment_methods:
            raise InvalidConfigurationError("payment_method", method, self.valid_payment_methods)

        payment_information.set_valid_payment_methods(self.valid_payment_methods)
        payment_information.payment_method = method
        self._payment_informations.append(payment_information)

    @property
    def payment_informations(self) -> tuple[PaymentInformation, ...]:
        return tuple(self._payment_informations)

    @property
    def number_of_transactions(self) -> int:
        """NbOfTxs del GrpHdr: suma de todos los bloques."""
        return sum(p.number_of_transactions for p in self._payment_informations)

    @property
    def control_sum_cents(self) -> int:
        """CtrlSum del GrpHdr en centavos: suma de todos los bloques."""
        return sum(p.control_sum_cents for p in self._payment_informations)

    def validate(self) -> None:
        """Verifica las reglas globales antes de generar el XML.

        Raises:
            InvalidTransferFileConfigurationError: Archivo sin bloques o
                bloque sin transferencias.
            InvalidTransferTypeError: Transferencia de otro tipo de archivo.
        """
        if not self._payment_informations:
            raise InvalidTransferFileConfigurationError(
                "El archivo no contiene ningún PaymentInformation"
            )
        for payment in self._payment_informations:
            if payment.number_of_transactions == 0:
                raise InvalidTransferFileConfigurationError(
                    "El PaymentInformation debe contener al menos una transferencia",
                    payment.id,
                )
            for transfer in payment.transfers:
                if not isinstance(transfer, self.transfer_type):
                    raise InvalidTransferTypeError(
                        self.transfer_type.__name__, type(transfer).__name__
                    )
            self._validate_payment(payment)

    def _validate_payment(self, payment: PaymentInformation) -> None:
        """Reglas propias de cada tipo de archivo. Por defecto, ninguna."""

    def accept(self, builder: "DomBuilder") -> None:
        """Recorre el documento: primero el archivo, luego cada bloque en orden."""
        builder.visit_transfer_file(self)
        for payment in self._payment_informations:
            payment.accept(builder)


class CustomerCreditTransferFile(TransferFile):
    """Archivo de transferencias a acreedores (pain.001)."""

    payment_method = DEFAULT_CREDIT_TRANSFER_PAYMENT_METHOD
    valid_payment_methods = CREDIT_TRANSFER_PAYMENT_METHODS
    transfer_type = CreditTransferInformation


class CustomerDirectDebitTransferFile(TransferFile):
    """Archivo de cobros domiciliados (pain.008).

    Cada bloque debe indicar el identificador de acreedor, el tipo de
    secuencia del mandato y el instrumento local (CORE, B2B, COR1).
    """

    payment_method = DEFAULT_DIRECT_DEBIT_PAYMENT_METHOD
    valid_payment_methods = DIRECT_DEBIT_PAYMENT_METHODS
    transfer_type = DirectDebitInformation

    def _validate_payment(self, payment: PaymentInformation) -> None:
        if not payment.creditor_id:
            raise InvalidTransferFileConfigurationError(
                "Falta el creditor_id (CdtrSchmeId)", payment.id
            )
        if payment.sequence_type is None:
            raise InvalidTransferFileConfigurationError(
                "Falta el sequence_type (SeqTp)", payment.id
            )
        if payment.local_instrument_code is None:
            raise InvalidTransferFileConfigurationError(
                "Falta el local_instrument_code (LclInstrm)", payment.id
            )
        for transfer in payment.transfers:
            if transfer.mandate_sign_date is None and payment.mandate_sign_date is None:
                raise InvalidTransferFileConfigurationError(
                    f"El mandato '{transfer.mandate_id}' no tiene fecha de firma (DtOfSgntr)",
                    payment.id,
                )
