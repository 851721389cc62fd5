"""
Modelo de dominio: Encabezado de grupo (GrpHdr) de un archivo SEPA.

Contiene los datos que identifican el mensaje completo. Los totales del
encabezado (NbOfTxs, CtrlSum) NO se guardan aquí: el TransferFile los
calcula al momento de recorrerse, sumando sus bloques.
"""

from dataclasses import dataclass, field
from datetime import datetime

from sepa_builder.domain.shared.text_cleaner import sanitize_string


@dataclass(frozen=True)
class GroupHeader:
    """Datos de identificación del mensaje."""

    message_identification: str
    """MsgId. Único por archivo enviado al banco (máx. 35 caracteres)."""

    initiating_party_name: str
    """Nombre de quien genera el archivo. Se sanitiza."""

    creation_datetime: datetime = field(default_factory=datetime.now)
    """CreDtTm. Por defecto, el momento de creación del encabezado."""

    initiating_party_id: str = ""
    """Identificación opcional de quien genera el archivo (InitgPty/Id)."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not self.message_identification:
            raise ValueError("El message_identification no puede estar vacío")
        object.__setattr__(self, "initiating_party_name", sanitize_string(self.initiating_party_name))
        if not self.initiating_party_name:
            raise ValueError("El initiating_party_name no puede estar vacío")
