"""
Catálogos cerrados de códigos SEPA (ISO 20022).

Un solo lugar con todos los valores que los bancos aceptan para los campos
enumerados del bloque PaymentInformation y de los archivos. Los setters
validados del dominio comparan contra estas tuplas, siempre en mayúsculas.
"""

# --- PmtTpInf/LclInstrm/Cd ---
LOCAL_INSTRUMENT_CODES: tuple[str, ...] = ("B2B", "CORE", "COR1", "IN", "ONCL")

# --- PmtTpInf/InstrPrty ---
INSTRUCTION_PRIORITIES: tuple[str, ...] = ("NORM", "HIGH")

# --- PmtTpInf/SvcLvl/Cd ---
SERVICE_LEVELS: tuple[str, ...] = ("SEPA", "NURG")
DEFAULT_SERVICE_LEVEL = "SEPA"

# --- Esquema de identificación de la cuenta (IBAN o BBAN) ---
SCHEMA_NAMES: tuple[str, ...] = ("IBAN", "BBAN")
DEFAULT_SCHEMA_NAME = "IBAN"

# --- PmtMtd por tipo de archivo ---
CREDIT_TRANSFER_PAYMENT_METHODS: tuple[str, ...] = ("TRF", "TRA", "CHK")
DEFAULT_CREDIT_TRANSFER_PAYMENT_METHOD = "TRF"

DIRECT_DEBIT_PAYMENT_METHODS: tuple[str, ...] = ("DD",)
DEFAULT_DIRECT_DEBIT_PAYMENT_METHOD = "DD"

DEFAULT_CURRENCY = "EUR"
DEFAULT_DUE_DATE_FORMAT = "%Y-%m-%d"

# --- Formatos pain y sus namespaces ---
PAIN_CREDIT_TRANSFER = "pain.001.001.03"
PAIN_DIRECT_DEBIT = "pain.008.001.02"

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


def pain_namespace(pain_format: str) -> str:
    """Devuelve el namespace ISO 20022 de un formato pain.

    Ejemplos:
        >>> pain_namespace("pain.001.001.03")
        'urn:iso:std:iso:20022:tech:xsd:pain.001.001.03'
    """
    return f"urn:iso:std:iso:20022:tech:xsd:{pain_format}"


# --- Valores fijos del XML ---
CHARGE_BEARER = "SLEV"
NOT_PROVIDED = "NOTPROVIDED"
CREDITOR_SCHEME_NAME = "SEPA"
CREDITOR_REFERENCE_TYPE = "SCOR"

# --- Longitudes máximas de texto (Max35Text, Max70Text, Max140Text) ---
MAX_ID_LENGTH = 35
MAX_NAME_LENGTH = 70
MAX_REMITTANCE_LENGTH = 140
