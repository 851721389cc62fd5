"""
Tests para las transferencias (CreditTransferInformation, DirectDebitInformation).

Verifican que sea imposible crear una transferencia con un monto que no
sea un entero positivo en centavos, y que los textos se normalicen.
"""

from datetime import date
from decimal import Decimal

import pytest

from sepa_builder.domain.models import (
    CreditTransferInformation,
    DirectDebitInformation,
    TransferInformation,
)


def _credit(**overrides) -> CreditTransferInformation:
    datos = {
        "amount_cents": 1234,
        "iban": "DE89370400440532013000",
        "bic": "COBADEFFXXX",
        "name": "Proveedor SA",
        "end_to_end_id": "FACTURA-1",
    }
    datos.update(overrides)
    return CreditTransferInformation(**datos)


def _debit(**overrides) -> DirectDebitInformation:
    datos = {
        "amount_cents": 990,
        "iban": "FR1420041010050500013M02606",
        "name": "Cliente",
        "end_to_end_id": "CUOTA-1",
        "mandate_id": "MND-1",
    }
    datos.update(overrides)
    return DirectDebitInformation(**datos)


class TestCreditTransferInformation:
    """Pruebas para la transferencia a acreedor."""

    def test_crear_basica(self):
        t = _credit()
        assert t.transfer_amount == 1234
        assert t.currency == "EUR"
        assert t.remittance_information == ""
        assert t.creditor_reference == ""

    def test_iban_y_bic_se_normalizan(self):
        t = _credit(iban="de89 3704 0044 0532 0130 00", bic="cobadeff xxx")
        assert t.iban == "DE89370400440532013000"
        assert t.bic == "COBADEFFXXX"

    def test_nombre_y_concepto_se_sanitizan(self):
        t = _credit(name="José Núñez", remittance_information="Factura #42 – marzo")
        assert t.name == "Jose Nunez"
        assert t.remittance_information == "Factura 42 marzo"

    def test_moneda_en_mayusculas(self):
        assert _credit(currency="chf").currency == "CHF"

    @pytest.mark.parametrize("monto", [0, -1, -1000])
    def test_monto_no_positivo_lanza_error(self, monto):
        with pytest.raises(ValueError, match="positivo"):
            _credit(amount_cents=monto)

    @pytest.mark.parametrize("monto", [12.34, Decimal("12.34"), "1234", True])
    def test_monto_no_entero_lanza_error(self, monto):
        with pytest.raises(ValueError, match="entero"):
            _credit(amount_cents=monto)

    def test_iban_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="IBAN"):
            _credit(iban="")

    def test_nombre_que_queda_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="nombre"):
            _credit(name="###")

    def test_end_to_end_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="end_to_end_id"):
            _credit(end_to_end_id="")

    def test_es_inmutable(self):
        t = _credit()
        with pytest.raises(AttributeError):
            t.amount_cents = 1  # type: ignore

    def test_solo_argumentos_por_nombre(self):
        with pytest.raises(TypeError):
            CreditTransferInformation(100, "DE89370400440532013000", "X", "E2E")  # type: ignore


class TestDirectDebitInformation:
    """Pruebas para la domiciliación."""

    def test_crear_basica(self):
        t = _debit(mandate_sign_date=date(2023, 5, 1))
        assert t.transfer_amount == 990
        assert t.mandate_id == "MND-1"
        assert t.mandate_sign_date == date(2023, 5, 1)
        assert t.amendment_indicator is False

    def test_mandato_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="mandate_id"):
            _debit(mandate_id="")

    def test_modificacion_por_mandato_anterior(self):
        t = _debit(original_mandate_id="MND-0")
        assert t.amendment_indicator is True

    def test_modificacion_por_cuenta_anterior(self):
        t = _debit(original_debtor_iban="de89 3704 0044 0532 0130 00")
        assert t.amendment_indicator is True
        assert t.original_debtor_iban == "DE89370400440532013000"

    def test_validaciones_de_la_base_aplican(self):
        with pytest.raises(ValueError, match="positivo"):
            _debit(amount_cents=0)


class TestTransferInformation:
    """La base es abstracta."""

    def test_no_se_instancia(self):
        with pytest.raises(TypeError):
            TransferInformation(  # type: ignore
                amount_cents=1, iban="X", name="Y", end_to_end_id="Z"
            )
