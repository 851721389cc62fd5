"""
Tests para el DOM builder de domiciliaciones (pain.008.001.02).
"""

from datetime import date, datetime

import pytest
from lxml import etree

from sepa_builder.adapters.output.dom_builders.direct_debit_dom_builder import (
    CustomerDirectDebitTransferDomBuilder,
)
from sepa_builder.domain.exceptions import (
    InvalidTransferFileConfigurationError,
    InvalidTransferTypeError,
)
from sepa_builder.domain.models import (
    CreditTransferInformation,
    CustomerDirectDebitTransferFile,
    DirectDebitInformation,
    GroupHeader,
    PaymentInformation,
)

NS = {"p": "urn:iso:std:iso:20022:tech:xsd:pain.008.001.02"}


def _debit(amount_cents: int, e2e: str, **extra) -> DirectDebitInformation:
    datos = {
        "amount_cents": amount_cents,
        "iban": "FR1420041010050500013M02606",
        "bic": "PSSTFRPPLIL",
        "name": "Cliente Uno",
        "end_to_end_id": e2e,
        "mandate_id": "MND-1",
        "mandate_sign_date": date(2023, 1, 15),
        "remittance_information": "Cuota mayo",
    }
    datos.update(extra)
    return DirectDebitInformation(**datos)


def _render(archivo: CustomerDirectDebitTransferFile) -> etree._Element:
    builder = CustomerDirectDebitTransferDomBuilder()
    archivo.accept(builder)
    return etree.fromstring(builder.as_xml().encode("utf-8"))


@pytest.fixture
def pago() -> PaymentInformation:
    pago = PaymentInformation("DD-1", "DE89370400440532013000", "COBADEFFXXX", "Club Deportivo")
    pago.due_date = date(2024, 6, 10)
    pago.creditor_id = "DE98ZZZ09999999999"
    pago.sequence_type = "rcur"
    pago.local_instrument_code = "CORE"
    return pago


@pytest.fixture
def archivo(pago) -> CustomerDirectDebitTransferFile:
    archivo = CustomerDirectDebitTransferFile(
        GroupHeader("MSG-DD", "Club Deportivo", creation_datetime=datetime(2024, 5, 2, 8, 0, 0))
    )
    archivo.add_payment_information(pago)
    return archivo


def _pmt_inf(archivo) -> etree._Element:
    return _render(archivo).find("p:CstmrDrctDbtInitn/p:PmtInf", NS)


class TestDocumento:
    """Raíz y encabezado de grupo."""

    def test_raiz(self, archivo, pago):
        pago.add_transfer(_debit(1000, "E2E-1"))
        doc = _render(archivo)
        assert doc.tag == "{urn:iso:std:iso:20022:tech:xsd:pain.008.001.02}Document"
        assert doc.find("p:CstmrDrctDbtInitn", NS) is not None

    def test_totales(self, archivo, pago):
        pago.add_transfer(_debit(1999, "E2E-1"))
        pago.add_transfer(_debit(1, "E2E-2"))
        grp_hdr = _render(archivo).find("p:CstmrDrctDbtInitn/p:GrpHdr", NS)
        assert grp_hdr.findtext("p:NbOfTxs", namespaces=NS) == "2"
        assert grp_hdr.findtext("p:CtrlSum", namespaces=NS) == "20.00"
        assert grp_hdr.findtext("p:CreDtTm", namespaces=NS) == "2024-05-02T08:00:00"


class TestBloqueDeCobro:
    """Elemento PmtInf de pain.008."""

    def test_orden_de_elementos(self, archivo, pago):
        pago.add_transfer(_debit(1000, "E2E-1"))
        tags = [etree.QName(e).localname for e in _pmt_inf(archivo)]
        assert tags == [
            "PmtInfId",
            "PmtMtd",
            "NbOfTxs",
            "CtrlSum",
            "PmtTpInf",
            "ReqdColltnDt",
            "Cdtr",
            "CdtrAcct",
            "CdtrAgt",
            "ChrgBr",
            "CdtrSchmeId",
            "DrctDbtTxInf",
        ]

    def test_campos_del_bloque(self, archivo, pago):
        pago.add_transfer(_debit(1000, "E2E-1"))
        pmt_inf = _pmt_inf(archivo)
        assert pmt_inf.findtext("p:PmtMtd", namespaces=NS) == "DD"
        assert pmt_inf.findtext("p:ReqdColltnDt", namespaces=NS) == "2024-06-10"
        assert pmt_inf.findtext("p:PmtTpInf/p:SvcLvl/p:Cd", namespaces=NS) == "SEPA"
        assert pmt_inf.findtext("p:PmtTpInf/p:LclInstrm/p:Cd", namespaces=NS) == "CORE"
        assert pmt_inf.findtext("p:PmtTpInf/p:SeqTp", namespaces=NS) == "RCUR"
        assert pmt_inf.findtext("p:Cdtr/p:Nm", namespaces=NS) == "Club Deportivo"
        assert pmt_inf.findtext("p:CdtrAcct/p:Id/p:IBAN", namespaces=NS) == "DE89370400440532013000"
        assert pmt_inf.findtext("p:CdtrAgt/p:FinInstnId/p:BIC", namespaces=NS) == "COBADEFFXXX"

    def test_identificador_de_acreedor(self, archivo, pago):
        pago.add_transfer(_debit(1000, "E2E-1"))
        othr = _pmt_inf(archivo).find("p:CdtrSchmeId/p:Id/p:PrvtId/p:Othr", NS)
        assert othr.findtext("p:Id", namespaces=NS) == "DE98ZZZ09999999999"
        assert othr.findtext("p:SchmeNm/p:Prtry", namespaces=NS) == "SEPA"

    def test_ajustes_generales_ocultos(self, archivo, pago):
        pago.hide_general_settings()
        pago.add_transfer(_debit(1000, "E2E-1"))
        assert _pmt_inf(archivo).find("p:PmtTpInf", NS) is None

    def test_iban_oculto(self, archivo, pago):
        pago.hide_origin_account_iban()
        pago.add_transfer(_debit(1000, "E2E-1"))
        assert _pmt_inf(archivo).find("p:CdtrAcct", NS) is None


class TestCobros:
    """Elemento DrctDbtTxInf."""

    def _tx(self, archivo) -> etree._Element:
        return _pmt_inf(archivo).find("p:DrctDbtTxInf", NS)

    def test_campos_del_cobro(self, archivo, pago):
        pago.add_transfer(_debit(4550, "E2E-1"))
        tx = self._tx(archivo)
        assert [etree.QName(e).localname for e in tx] == [
            "PmtId",
            "InstdAmt",
            "DrctDbtTx",
            "DbtrAgt",
            "Dbtr",
            "DbtrAcct",
            "RmtInf",
        ]
        assert tx.findtext("p:PmtId/p:EndToEndId", namespaces=NS) == "E2E-1"
        assert tx.find("p:InstdAmt", NS).get("Ccy") == "EUR"
        assert tx.findtext("p:InstdAmt", namespaces=NS) == "45.50"
        assert tx.findtext("p:DbtrAgt/p:FinInstnId/p:BIC", namespaces=NS) == "PSSTFRPPLIL"
        assert tx.findtext("p:Dbtr/p:Nm", namespaces=NS) == "Cliente Uno"
        assert tx.findtext("p:DbtrAcct/p:Id/p:IBAN", namespaces=NS) == "FR1420041010050500013M02606"
        assert tx.findtext("p:RmtInf/p:Ustrd", namespaces=NS) == "Cuota mayo"

    def test_mandato(self, archivo, pago):
        pago.add_transfer(_debit(100, "E2E-1"))
        mndt = self._tx(archivo).find("p:DrctDbtTx/p:MndtRltdInf", NS)
        assert mndt.findtext("p:MndtId", namespaces=NS) == "MND-1"
        assert mndt.findtext("p:DtOfSgntr", namespaces=NS) == "2023-01-15"
        assert mndt.find("p:AmdmntInd", NS) is None

    def test_fecha_de_mandato_del_bloque(self, archivo, pago):
        pago.mandate_sign_date = date(2020, 2, 29)
        pago.add_transfer(_debit(100, "E2E-1", mandate_sign_date=None))
        mndt = self._tx(archivo).find("p:DrctDbtTx/p:MndtRltdInf", NS)
        assert mndt.findtext("p:DtOfSgntr", namespaces=NS) == "2020-02-29"

    def test_modificacion_de_mandato(self, archivo, pago):
        pago.add_transfer(
            _debit(
                100,
                "E2E-1",
                original_mandate_id="MND-OLD",
                original_debtor_iban="DE89 3704 0044 0532 0130 00",
            )
        )
        mndt = self._tx(archivo).find("p:DrctDbtTx/p:MndtRltdInf", NS)
        assert mndt.findtext("p:AmdmntInd", namespaces=NS) == "true"
        dtls = mndt.find("p:AmdmntInfDtls", NS)
        assert dtls.findtext("p:OrgnlMndtId", namespaces=NS) == "MND-OLD"
        assert dtls.findtext("p:OrgnlDbtrAcct/p:Id/p:IBAN", namespaces=NS) == "DE89370400440532013000"

    def test_deudor_sin_bic(self, archivo, pago):
        pago.add_transfer(_debit(100, "E2E-1", bic=""))
        tx = self._tx(archivo)
        assert tx.findtext("p:DbtrAgt/p:FinInstnId/p:Othr/p:Id", namespaces=NS) == "NOTPROVIDED"


class TestErrores:
    def test_transferencia_lanza_error(self):
        builder = CustomerDirectDebitTransferDomBuilder()
        credito = CreditTransferInformation(
            amount_cents=100,
            iban="DE89370400440532013000",
            name="Proveedor",
            end_to_end_id="E",
        )
        with pytest.raises(InvalidTransferTypeError, match="DirectDebitInformation"):
            builder.visit_credit_transfer(credito)


class TestIdentificadoresDelMandato:
    def test_mandato_largo_lanza_error(self, archivo, pago):
        pago.add_transfer(_debit(100, "E2E-1", mandate_id="M" * 36))
        with pytest.raises(InvalidTransferFileConfigurationError, match="MndtId"):
            _render(archivo)

    def test_mandato_original_largo_lanza_error(self, archivo, pago):
        pago.add_transfer(_debit(100, "E2E-1", original_mandate_id="M" * 36))
        with pytest.raises(InvalidTransferFileConfigurationError, match="OrgnlMndtId"):
            _render(archivo)
