"""
Modelo de dominio: Transferencia individual (hoja del documento SEPA).

Una TransferInformation representa UN movimiento de fondos instruido al
banco: un pago a un acreedor (CreditTransferInformation) o un cobro
domiciliado a un deudor (DirectDebitInformation).

Decisiones de diseño:
- El monto se guarda en centavos enteros (`amount_cents`). Nunca float:
  el total de control del bloque se calcula sumando estos enteros.
- Son dataclasses inmutables: una transferencia ya agregada a un bloque no
  puede cambiar su monto sin romper el total de control del bloque.
- Cada subclase decide qué método del DomBuilder invoca en `accept`
  (doble despacho).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from sepa_builder.domain.shared.sepa_codes import DEFAULT_CURRENCY
from sepa_builder.domain.shared.text_cleaner import sanitize_string

if TYPE_CHECKING:
    from sepa_builder.domain.ports.dom_builder import DomBuilder


@dataclass(frozen=True, kw_only=True)
class TransferInformation(ABC):
    """Datos comunes a toda transferencia. No se instancia directamente."""

    amount_cents: int
    """Monto en unidades menores de la moneda. Siempre entero y > 0."""

    iban: str
    """IBAN de la contraparte (acreedor en transferencias, deudor en
    domiciliaciones)."""

    name: str
    """Nombre de la contraparte. Se sanitiza al juego de caracteres SEPA."""

    end_to_end_id: str
    """Referencia extremo a extremo que viaja sin cambios hasta el
    beneficiario."""

    bic: str = ""
    """BIC del banco de la contraparte. Vacío si no se conoce."""

    remittance_information: str = ""
    """Concepto no estructurado (Ustrd). Se sanitiza."""

    currency: str = DEFAULT_CURRENCY

    instruction_id: str = ""
    """Identificador de la instrucción entre ordenante y su banco."""

    @property
    def transfer_amount(self) -> int:
        """Monto en centavos. Es lo que suma el bloque al agregar la transferencia."""
        return self.amount_cents

    @abstractmethod
    def accept(self, builder: "DomBuilder") -> None:
        """Se presenta al builder con el método correspondiente a su tipo."""
        ...

    def __post_init__(self) -> None:
        """Validaciones y normalización al crear la instancia.

        frozen=True obliga a usar object.__setattr__ para guardar los
        valores sanitizados.
        """
        if isinstance(self.amount_cents, bool) or not isinstance(self.amount_cents, int):
            raise ValueError(
                f"amount_cents debe ser un entero en centavos, "
                f"recibió {type(self.amount_cents).__name__}"
            )
        if self.amount_cents <= 0:
            raise ValueError(f"amount_cents debe ser positivo: {self.amount_cents}")
        if not self.iban:
            raise ValueError("El IBAN de la transferencia no puede estar vacío")
        if not self.end_to_end_id:
            raise ValueError("El end_to_end_id no puede estar vacío")

        object.__setattr__(self, "name", sanitize_string(self.name))
        if not self.name:
            raise ValueError("El nombre de la contraparte no puede estar vacío")
        object.__setattr__(
            self, "remittance_information", sanitize_string(self.remittance_information)
        )
        object.__setattr__(self, "iban", self.iban.replace(" ", "").upper())
        object.__setattr__(self, "bic", self.bic.replace(" ", "").upper())
        object.__setattr__(self, "currency", self.currency.upper())


@dataclass(frozen=True, kw_only=True)
class CreditTransferInformation(TransferInformation):
    """Transferencia a un acreedor (CdtTrfTxInf de pain.001)."""

    creditor_reference: str = ""
    """Referencia estructurada del acreedor (ISO 11649, tipo SCOR).
    Si está presente, se emite en lugar del concepto no estructurado."""

    country: str = ""
    """Código de país del acreedor (PstlAdr/Ctry). Opcional."""

    def accept(self, builder: "DomBuilder") -> None:
        builder.visit_credit_transfer(self)


@dataclass(frozen=True, kw_only=True)
class DirectDebitInformation(TransferInformation):
    """Cobro domiciliado a un deudor (DrctDbtTxInf de pain.008)."""

    mandate_id: str
    """Referencia única del mandato firmado por el deudor."""

    mandate_sign_date: date | None = None
    """Fecha de firma del mandato. Si es None, el builder usa la del bloque."""

    original_mandate_id: str = ""
    """Mandato anterior, solo si el mandato fue modificado."""

    original_debtor_iban: str = ""
    """IBAN anterior del deudor, solo si cambió de cuenta."""

    @property
    def amendment_indicator(self) -> bool:
        """True si el mandato tiene modificaciones que informar (AmdmntInd)."""
        return bool(self.original_mandate_id or self.original_debtor_iban)

    def accept(self, builder: "DomBuilder") -> None:
        builder.visit_direct_debit(self)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.mandate_id:
            raise ValueError("El mandate_id no puede estar vacío")
        object.__setattr__(
            self, "original_debtor_iban", self.original_debtor_iban.replace(" ", "").upper()
        )
