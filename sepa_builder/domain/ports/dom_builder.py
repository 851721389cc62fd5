"""
Puerto de salida: Constructor del documento XML (visitante).

Define el contrato que recibe las llamadas del recorrido del documento.
El dominio (TransferFile, PaymentInformation, transferencias) no sabe cómo
se escribe el XML: solo invoca un método por cada tipo de elemento que
visita.

El conjunto de elementos visitables es cerrado:

    TransferFile               → visit_transfer_file
    PaymentInformation         → visit_payment_information
    CreditTransferInformation  → visit_credit_transfer
    DirectDebitInformation     → visit_direct_debit

Orden garantizado del recorrido: archivo, y por cada bloque (en orden de
inserción) el bloque y luego sus transferencias (en orden de inserción).
"""

from abc import ABC, abstractmethod

from sepa_builder.domain.models.payment_information import PaymentInformation
from sepa_builder.domain.models.transfer_file import TransferFile
from sepa_builder.domain.models.transfer_information import (
    CreditTransferInformation,
    DirectDebitInformation,
)


class DomBuilder(ABC):
    """Interfaz para renderizar un documento SEPA."""

    @abstractmethod
    def visit_transfer_file(self, transfer_file: TransferFile) -> None:
        """Renderiza el encabezado de grupo (GrpHdr) del archivo.

        Los totales se leen del archivo en este momento
        (number_of_transactions, control_sum_cents).
        """
        ...

    @abstractmethod
    def visit_payment_information(self, payment_information: PaymentInformation) -> None:
        """Renderiza un bloque PmtInf.

        Debe respetar las banderas de ocultamiento del bloque y usar
        `formatted_due_date` para la fecha de ejecución.
        """
        ...

    @abstractmethod
    def visit_credit_transfer(self, transfer: CreditTransferInformation) -> None:
        """Renderiza una transferencia dentro del último bloque visitado.

        Raises:
            InvalidTransferTypeError: Si el builder no admite transferencias.
        """
        ...

    @abstractmethod
    def visit_direct_debit(self, transfer: DirectDebitInformation) -> None:
        """Renderiza una domiciliación dentro del último bloque visitado.

        Raises:
            InvalidTransferTypeError: Si el builder no admite domiciliaciones.
        """
        ...

    @abstractmethod
    def as_xml(self) -> str:
        """Devuelve el documento generado como texto XML (UTF-8)."""
        ...
