"""
Modelos de dominio del proyecto sepa-builder.

Las transferencias y el encabezado son dataclasses inmutables; el bloque
PaymentInformation y el TransferFile son agregados que se arman paso a paso
y luego se recorren con un DomBuilder.

Uso:
    from sepa_builder.domain.models import PaymentInformation, CreditTransferInformation
"""

from sepa_builder.domain.models.group_header import GroupHeader
from sepa_builder.domain.models.payment_information import PaymentInformation, SequenceType
from sepa_builder.domain.models.transfer_file import (
    CustomerCreditTransferFile,
    CustomerDirectDebitTransferFile,
    TransferFile,
)
from sepa_builder.domain.models.transfer_information import (
    CreditTransferInformation,
    DirectDebitInformation,
    TransferInformation,
)

__all__ = [
    "CreditTransferInformation",
    "CustomerCreditTransferFile",
    "CustomerDirectDebitTransferFile",
    "DirectDebitInformation",
    "GroupHeader",
    "PaymentInformation",
    "SequenceType",
    "TransferFile",
    "TransferInformation",
]
