"""
Punto de ensamblado de los facades.

Este módulo es el ÚNICO lugar donde se conectan las piezas concretas:
- Crea el TransferFile con su GroupHeader.
- Crea el registro de builders y el logger.
- Los inyecta en el facade correspondiente.

No contiene lógica de negocio, solo el cableado.

Uso:
    facade = create_customer_credit_facade("MSG-001", "ACME SA")
    facade.add_payment_info("nomina", {...})
    facade.add_transfer("nomina", {...})
    xml = facade.as_xml()
"""

from datetime import datetime

from sepa_builder.adapters.output.loggers.console_logger import ConsoleLogger
from sepa_builder.domain.models.group_header import GroupHeader
from sepa_builder.domain.models.transfer_file import (
    CustomerCreditTransferFile,
    CustomerDirectDebitTransferFile,
)
from sepa_builder.domain.ports.assembly_logger import AssemblyLogger
from sepa_builder.domain.services.transfer_file_facade import (
    CustomerCreditFacade,
    CustomerDirectDebitFacade,
)
from sepa_builder.infrastructure.registry import DomBuilderRegistry, create_default_registry


def _group_header(
    message_identification: str,
    initiating_party_name: str,
    initiating_party_id: str,
    creation_datetime: datetime | None,
) -> GroupHeader:
    if creation_datetime is None:
        return GroupHeader(
            message_identification, initiating_party_name, initiating_party_id=initiating_party_id
        )
    return GroupHeader(
        message_identification,
        initiating_party_name,
        creation_datetime=creation_datetime,
        initiating_party_id=initiating_party_id,
    )


def create_customer_credit_facade(
    message_identification: str,
    initiating_party_name: str,
    initiating_party_id: str = "",
    creation_datetime: datetime | None = None,
    logger: AssemblyLogger | None = None,
    registry: DomBuilderRegistry | None = None,
) -> CustomerCreditFacade:
    """Crea un facade de transferencias (pain.001.001.03) listo para usar.

    Args:
        message_identification: MsgId del documento.
        initiating_party_name: Nombre de quien genera el archivo.
        initiating_party_id: Identificación opcional de quien lo genera.
        creation_datetime: CreDtTm. Por defecto, ahora.
        logger: Bitácora. Por defecto, ConsoleLogger.
        registry: Registro de builders. Por defecto, create_default_registry().
    """
    transfer_file = CustomerCreditTransferFile(
        _group_header(
            message_identification, initiating_party_name, initiating_party_id, creation_datetime
        )
    )
    return CustomerCreditFacade(
        transfer_file,
        registry if registry is not None else create_default_registry(),
        logger if logger is not None else ConsoleLogger(),
    )


def create_customer_direct_debit_facade(
    message_identification: str,
    initiating_party_name: str,
    initiating_party_id: str = "",
    creation_datetime: datetime | None = None,
    logger: AssemblyLogger | None = None,
    registry: DomBuilderRegistry | None = None,
) -> CustomerDirectDebitFacade:
    """Crea un facade de domiciliaciones (pain.008.001.02) listo para usar.

    Mismos argumentos que create_customer_credit_facade.
    """
    transfer_file = CustomerDirectDebitTransferFile(
        _group_header(
            message_identification, initiating_party_name, initiating_party_id, creation_datetime
        )
    )
    return CustomerDirectDebitFacade(
        transfer_file,
        registry if registry is not None else create_default_registry(),
        logger if logger is not None else ConsoleLogger(),
    )
