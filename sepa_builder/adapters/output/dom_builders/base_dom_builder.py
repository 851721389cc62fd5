"""
Adaptador de salida: Base de los DOM builders con lxml.

Concentra lo que comparten pain.001 y pain.008:
- El elemento raíz Document con su namespace y xsi:schemaLocation.
- El encabezado de grupo (GrpHdr).
- Helpers para agentes financieros, cuentas, partes y conceptos.
- La serialización final a texto.

Cada subclase fija `pain_format`, `root_tag` y renderiza sus bloques y
transferencias.
"""

from datetime import date

from lxml import etree

from sepa_builder.domain.exceptions import InvalidTransferFileConfigurationError
from sepa_builder.domain.models.payment_information import PaymentInformation
from sepa_builder.domain.models.transfer_file import TransferFile
from sepa_builder.domain.models.transfer_information import TransferInformation
from sepa_builder.domain.ports.dom_builder import DomBuilder
from sepa_builder.domain.shared.money import format_cents
from sepa_builder.domain.shared.sepa_codes import (
    CREDITOR_REFERENCE_TYPE,
    MAX_ID_LENGTH,
    MAX_NAME_LENGTH,
    MAX_REMITTANCE_LENGTH,
    NOT_PROVIDED,
    XSI_NAMESPACE,
    pain_namespace,
)
from sepa_builder.domain.shared.text_cleaner import truncate

_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
_DATE_FORMAT = "%Y-%m-%d"


class BaseDomBuilder(DomBuilder):
    """Arma el árbol lxml de un documento pain."""

    pain_format: str
    """Formato pain, por ejemplo 'pain.001.001.03'."""

    root_tag: str
    """Elemento hijo de Document, por ejemplo 'CstmrCdtTrfInitn'."""

    default_payment_method: str
    """PmtMtd a emitir si el bloque se visita sin método asignado."""

    def __init__(self, with_schema_location: bool = True) -> None:
        """
        Args:
            with_schema_location: Si True, agrega xsi:schemaLocation al
                                  Document. Algunos portales bancarios lo piden.
        """
        self.namespace = pain_namespace(self.pain_format)
        self._document = etree.Element(
            self._tag("Document"), nsmap={None: self.namespace, "xsi": XSI_NAMESPACE}
        )
        if with_schema_location:
            self._document.set(
                f"{{{XSI_NAMESPACE}}}schemaLocation",
                f"{self.namespace} {self.pain_format}.xsd",
            )
        self._root = self._el(self._document, self.root_tag)
        self._current_payment: etree._Element | None = None
        self._current_payment_information: PaymentInformation | None = None

    # =================================================================
    # Visitas comunes
    # =================================================================

    def visit_transfer_file(self, transfer_file: TransferFile) -> None:
        header = transfer_file.group_header
        grp_hdr = self._el(self._root, "GrpHdr")
        self._el(grp_hdr, "MsgId", self._identifier(header.message_identification, "MsgId"))
        self._el(grp_hdr, "CreDtTm", header.creation_datetime.strftime(_DATETIME_FORMAT))
        self._el(grp_hdr, "NbOfTxs", str(transfer_file.number_of_transactions))
        self._el(grp_hdr, "CtrlSum", format_cents(transfer_file.control_sum_cents))

        initg_pty = self._el(grp_hdr, "InitgPty")
        self._el(initg_pty, "Nm", truncate(header.initiating_party_name, MAX_NAME_LENGTH))
        if header.initiating_party_id:
            self._add_organisation_id(initg_pty, header.initiating_party_id)

    def as_xml(self) -> str:
        return etree.tostring(self._document, xml_declaration=True, encoding="UTF-8").decode(
            "utf-8"
        )

    # =================================================================
    # Helpers de armado
    # =================================================================

    def _tag(self, name: str) -> str:
        return f"{{{self.namespace}}}{name}"

    def _el(self, parent: etree._Element, tag: str, text: str | None = None) -> etree._Element:
        e = etree.SubElement(parent, self._tag(tag))
        if text is not None:
            e.text = str(text)
        return e

    @staticmethod
    def _identifier(value: str, tag: str) -> str:
        """Devuelve un identificador Max35Text sin recortarlo.

        Raises:
            InvalidTransferFileConfigurationError: Si supera 35 caracteres.
        """
        if len(value) > MAX_ID_LENGTH:
            raise InvalidTransferFileConfigurationError(
                f"El {tag} '{value}' supera {MAX_ID_LENGTH} caracteres"
            )
        return value

    def _start_payment(self, payment_information: PaymentInformation) -> etree._Element:
        """Crea PmtInf con los campos que comparten ambos formatos.

        PmtInfId, PmtMtd, BtchBookg (si está definido), NbOfTxs, CtrlSum.
        """
        pmt_inf = self._el(self._root, "PmtInf")
        self._el(pmt_inf, "PmtInfId", self._identifier(payment_information.id, "PmtInfId"))
        self._el(pmt_inf, "PmtMtd", payment_information.payment_method or self.default_payment_method)
        if payment_information.batch_booking is not None:
            self._el(pmt_inf, "BtchBookg", "true" if payment_information.batch_booking else "false")
        self._el(pmt_inf, "NbOfTxs", str(payment_information.number_of_transactions))
        self._el(pmt_inf, "CtrlSum", format_cents(payment_information.control_sum_cents))

        self._current_payment = pmt_inf
        self._current_payment_information = payment_information
        return pmt_inf

    def _require_payment(self) -> etree._Element:
        """Devuelve el PmtInf en curso.

        Raises:
            InvalidTransferFileConfigurationError: Si se visita una
                transferencia antes que su bloque.
        """
        if self._current_payment is None:
            raise InvalidTransferFileConfigurationError(
                "Se visitó una transferencia antes de su PaymentInformation"
            )
        return self._current_payment

    def _add_payment_type_information(
        self, parent: etree._Element, payment_information: PaymentInformation, sequence: bool
    ) -> None:
        """PmtTpInf: InstrPrty, SvcLvl, LclInstrm, SeqTp (solo pain.008), CtgyPurp.

        No se emite si el bloque tiene ocultos los ajustes generales.
        """
        if payment_information.has_hidden_general_settings:
            return
        pmt_tp_inf = self._el(parent, "PmtTpInf")
        if payment_information.instruction_priority:
            self._el(pmt_tp_inf, "InstrPrty", payment_information.instruction_priority)
        svc_lvl = self._el(pmt_tp_inf, "SvcLvl")
        self._el(svc_lvl, "Cd", payment_information.service_level)
        if payment_information.local_instrument_code:
            lcl_instrm = self._el(pmt_tp_inf, "LclInstrm")
            self._el(lcl_instrm, "Cd", payment_information.local_instrument_code)
        if sequence and payment_information.sequence_type:
            self._el(pmt_tp_inf, "SeqTp", payment_information.sequence_type)
        if payment_information.category_purpose_code:
            ctgy_purp = self._el(pmt_tp_inf, "CtgyPurp")
            self._el(ctgy_purp, "Cd", payment_information.category_purpose_code)

    def _add_origin_party(
        self, parent: etree._Element, tag: str, payment_information: PaymentInformation
    ) -> None:
        """Dbtr (pain.001) o Cdtr (pain.008): nombre, país e identificación."""
        party = self._el(parent, tag)
        self._el(party, "Nm", truncate(payment_information.origin_name, MAX_NAME_LENGTH))
        if payment_information.country:
            pstl_adr = self._el(party, "PstlAdr")
            self._el(pstl_adr, "Ctry", payment_information.country)
        if payment_information.origin_bank_party_identification:
            self._add_organisation_id(
                party,
                payment_information.origin_bank_party_identification,
                payment_information.origin_bank_party_identification_scheme,
            )

    def _add_origin_account(
        self, parent: etree._Element, tag: str, payment_information: PaymentInformation
    ) -> None:
        """DbtrAcct / CdtrAcct de la cuenta propia, salvo que esté oculta."""
        if payment_information.has_hidden_origin_account_iban:
            return
        acct = self._el(parent, tag)
        acct_id = self._el(acct, "Id")
        if payment_information.schema_name == "BBAN":
            othr = self._el(acct_id, "Othr")
            self._el(othr, "Id", payment_information.origin_account_iban)
            schme_nm = self._el(othr, "SchmeNm")
            self._el(schme_nm, "Cd", "BBAN")
        else:
            self._el(acct_id, "IBAN", payment_information.origin_account_iban.replace(" ", ""))
        if payment_information.origin_account_currency:
            self._el(acct, "Ccy", payment_information.origin_account_currency)

    def _add_iban_account(self, parent: etree._Element, tag: str, iban: str) -> None:
        acct = self._el(parent, tag)
        acct_id = self._el(acct, "Id")
        self._el(acct_id, "IBAN", iban)

    def _add_agent(self, parent: etree._Element, tag: str, bic: str | None) -> None:
        """DbtrAgt / CdtrAgt. Sin BIC se emite Othr/Id = NOTPROVIDED."""
        agent = self._el(parent, tag)
        fin_instn_id = self._el(agent, "FinInstnId")
        if bic:
            self._el(fin_instn_id, "BIC", bic)
        else:
            othr = self._el(fin_instn_id, "Othr")
            self._el(othr, "Id", NOT_PROVIDED)

    def _add_organisation_id(
        self, parent: etree._Element, identification: str, scheme: str | None = None
    ) -> None:
        party_id = self._el(parent, "Id")
        org_id = self._el(party_id, "OrgId")
        othr = self._el(org_id, "Othr")
        self._el(othr, "Id", truncate(identification, MAX_ID_LENGTH))
        if scheme:
            schme_nm = self._el(othr, "SchmeNm")
            self._el(schme_nm, "Cd", scheme[:4])

    def _add_payment_id(self, parent: etree._Element, transfer: TransferInformation) -> None:
        pmt_id = self._el(parent, "PmtId")
        if transfer.instruction_id:
            self._el(pmt_id, "InstrId", self._identifier(transfer.instruction_id, "InstrId"))
        self._el(pmt_id, "EndToEndId", self._identifier(transfer.end_to_end_id, "EndToEndId"))

    def _add_instructed_amount(self, parent: etree._Element, transfer: TransferInformation) -> None:
        instd_amt = self._el(parent, "InstdAmt", format_cents(transfer.transfer_amount))
        instd_amt.set("Ccy", transfer.currency)

    def _add_remittance_information(
        self, parent: etree._Element, transfer: TransferInformation, creditor_reference: str = ""
    ) -> None:
        """RmtInf: referencia estructurada (SCOR) o concepto libre (Ustrd)."""
        if creditor_reference:
            rmt_inf = self._el(parent, "RmtInf")
            strd = self._el(rmt_inf, "Strd")
            cdtr_ref_inf = self._el(strd, "CdtrRefInf")
            tp = self._el(cdtr_ref_inf, "Tp")
            cd_or_prtry = self._el(tp, "CdOrPrtry")
            self._el(cd_or_prtry, "Cd", CREDITOR_REFERENCE_TYPE)
            self._el(cdtr_ref_inf, "Ref", truncate(creditor_reference, MAX_ID_LENGTH))
        elif transfer.remittance_information:
            rmt_inf = self._el(parent, "RmtInf")
            self._el(rmt_inf, "Ustrd", truncate(transfer.remittance_information, MAX_REMITTANCE_LENGTH))

    @staticmethod
    def _format_date(value: date) -> str:
        return value.strftime(_DATE_FORMAT)
