"""
Adaptador de salida: DOM builder de domiciliaciones (pain.008.001.02).

Orden de elementos de cada PmtInf:
    PmtInfId, PmtMtd, BtchBookg, NbOfTxs, CtrlSum, PmtTpInf, ReqdColltnDt,
    Cdtr, CdtrAcct, CdtrAgt, ChrgBr, CdtrSchmeId, DrctDbtTxInf*

La fecha de firma del mandato se toma de la transferencia; si no la trae,
se usa la del bloque (mandate_sign_date).
"""

from sepa_builder.adapters.output.dom_builders.base_dom_builder import BaseDomBuilder
from sepa_builder.domain.exceptions import InvalidTransferTypeError
from sepa_builder.domain.models.payment_information import PaymentInformation
from sepa_builder.domain.models.transfer_information import (
    CreditTransferInformation,
    DirectDebitInformation,
)
from sepa_builder.domain.shared.sepa_codes import (
    CHARGE_BEARER,
    CREDITOR_SCHEME_NAME,
    DEFAULT_DIRECT_DEBIT_PAYMENT_METHOD,
    MAX_NAME_LENGTH,
    PAIN_DIRECT_DEBIT,
)
from sepa_builder.domain.shared.text_cleaner import truncate


class CustomerDirectDebitTransferDomBuilder(BaseDomBuilder):
    """Genera el XML de un CustomerDirectDebitTransferFile."""

    pain_format = PAIN_DIRECT_DEBIT
    root_tag = "CstmrDrctDbtInitn"
    default_payment_method = DEFAULT_DIRECT_DEBIT_PAYMENT_METHOD

    def visit_payment_information(self, payment_information: PaymentInformation) -> None:
        pmt_inf = self._start_payment(payment_information)
        self._add_payment_type_information(pmt_inf, payment_information, sequence=True)
        self._el(pmt_inf, "ReqdColltnDt", payment_information.formatted_due_date)
        self._add_origin_party(pmt_inf, "Cdtr", payment_information)
        self._add_origin_account(pmt_inf, "CdtrAcct", payment_information)
        self._add_agent(pmt_inf, "CdtrAgt", payment_information.origin_agent_bic)
        self._el(pmt_inf, "ChrgBr", CHARGE_BEARER)

        if payment_information.creditor_id:
            cdtr_schme_id = self._el(pmt_inf, "CdtrSchmeId")
            schme_id = self._el(cdtr_schme_id, "Id")
            prvt_id = self._el(schme_id, "PrvtId")
            othr = self._el(prvt_id, "Othr")
            self._el(othr, "Id", payment_information.creditor_id)
            schme_nm = self._el(othr, "SchmeNm")
            self._el(schme_nm, "Prtry", CREDITOR_SCHEME_NAME)

    def visit_direct_debit(self, transfer: DirectDebitInformation) -> None:
        pmt_inf = self._require_payment()
        tx = self._el(pmt_inf, "DrctDbtTxInf")
        self._add_payment_id(tx, transfer)
        self._add_instructed_amount(tx, transfer)

        # --- Mandato ---
        drct_dbt_tx = self._el(tx, "DrctDbtTx")
        mndt_rltd_inf = self._el(drct_dbt_tx, "MndtRltdInf")
        self._el(mndt_rltd_inf, "MndtId", self._identifier(transfer.mandate_id, "MndtId"))
        sign_date = transfer.mandate_sign_date or self._current_payment_information.mandate_sign_date
        if sign_date is not None:
            self._el(mndt_rltd_inf, "DtOfSgntr", self._format_date(sign_date))
        if transfer.amendment_indicator:
            self._el(mndt_rltd_inf, "AmdmntInd", "true")
            amdmnt = self._el(mndt_rltd_inf, "AmdmntInfDtls")
            if transfer.original_mandate_id:
                self._el(amdmnt, "OrgnlMndtId", self._identifier(transfer.original_mandate_id, "OrgnlMndtId"))
            if transfer.original_debtor_iban:
                self._add_iban_account(amdmnt, "OrgnlDbtrAcct", transfer.original_debtor_iban)

        # --- Deudor ---
        self._add_agent(tx, "DbtrAgt", transfer.bic)
        dbtr = self._el(tx, "Dbtr")
        self._el(dbtr, "Nm", truncate(transfer.name, MAX_NAME_LENGTH))
        self._add_iban_account(tx, "DbtrAcct", transfer.iban)
        self._add_remittance_information(tx, transfer)

    def visit_credit_transfer(self, transfer: CreditTransferInformation) -> None:
        raise InvalidTransferTypeError("DirectDebitInformation", type(transfer).__name__)
