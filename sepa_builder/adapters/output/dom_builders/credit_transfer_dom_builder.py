"""
Adaptador de salida: DOM builder de transferencias (pain.001.001.03).

Orden de elementos de cada PmtInf:
    PmtInfId, PmtMtd, BtchBookg, NbOfTxs, CtrlSum, PmtTpInf, ReqdExctnDt,
    Dbtr, DbtrAcct, DbtrAgt, ChrgBr, CdtTrfTxInf*
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
    DEFAULT_CREDIT_TRANSFER_PAYMENT_METHOD,
    MAX_NAME_LENGTH,
    PAIN_CREDIT_TRANSFER,
)
from sepa_builder.domain.shared.text_cleaner import truncate


class CustomerCreditTransferDomBuilder(BaseDomBuilder):
    """Genera el XML de un CustomerCreditTransferFile."""

    pain_format = PAIN_CREDIT_TRANSFER
    root_tag = "CstmrCdtTrfInitn"
    default_payment_method = DEFAULT_CREDIT_TRANSFER_PAYMENT_METHOD

    def visit_payment_information(self, payment_information: PaymentInformation) -> None:
        pmt_inf = self._start_payment(payment_information)
        self._add_payment_type_information(pmt_inf, payment_information, sequence=False)
        self._el(pmt_inf, "ReqdExctnDt", payment_information.formatted_due_date)
        self._add_origin_party(pmt_inf, "Dbtr", payment_information)
        self._add_origin_account(pmt_inf, "DbtrAcct", payment_information)
        self._add_agent(pmt_inf, "DbtrAgt", payment_information.origin_agent_bic)
        self._el(pmt_inf, "ChrgBr", CHARGE_BEARER)

    def visit_credit_transfer(self, transfer: CreditTransferInformation) -> None:
        pmt_inf = self._require_payment()
        tx = self._el(pmt_inf, "CdtTrfTxInf")
        self._add_payment_id(tx, transfer)

        amt = self._el(tx, "Amt")
        self._add_instructed_amount(amt, transfer)

        # CdtrAgt es opcional en SEPA (IBAN-only)
        if transfer.bic:
            cdtr_agt = self._el(tx, "CdtrAgt")
            fin_instn_id = self._el(cdtr_agt, "FinInstnId")
            self._el(fin_instn_id, "BIC", transfer.bic)

        cdtr = self._el(tx, "Cdtr")
        self._el(cdtr, "Nm", truncate(transfer.name, MAX_NAME_LENGTH))
        if transfer.country:
            pstl_adr = self._el(cdtr, "PstlAdr")
            self._el(pstl_adr, "Ctry", transfer.country)

        self._add_iban_account(tx, "CdtrAcct", transfer.iban)
        self._add_remittance_information(tx, transfer, transfer.creditor_reference)

    def visit_direct_debit(self, transfer: DirectDebitInformation) -> None:
        raise InvalidTransferTypeError("CreditTransferInformation", type(transfer).__name__)
