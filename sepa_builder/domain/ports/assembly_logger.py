"""
Puerto de salida: Bitácora de armado de archivos SEPA.

Define los EVENTOS de negocio que ocurren mientras se arma un archivo:
- "Se agregó un bloque de pago"
- "Se agregó una transferencia de 12.34 EUR al bloque PAY-1"
- "El archivo no pasó la validación"
- "Se generó el documento con N transacciones"

La implementación decide el CÓMO (consola, archivo, memoria en tests).
El modelo de dominio no registra nada; solo el facade emite eventos.
"""

from abc import ABC, abstractmethod


class AssemblyLogger(ABC):
    """Interfaz para la bitácora de armado."""

    # --- Armado ---

    @abstractmethod
    def log_payment_added(self, payment_name: str, payment_id: str) -> None:
        """Registra que se agregó un bloque PaymentInformation.

        Args:
            payment_name: Nombre con el que el llamador identifica el bloque.
            payment_id: PmtInfId del bloque.
        """
        ...

    @abstractmethod
    def log_transfer_added(self, payment_name: str, end_to_end_id: str, amount_cents: int) -> None:
        """Registra que se agregó una transferencia a un bloque."""
        ...

    # --- Generación ---

    @abstractmethod
    def log_validation_failed(self, error: Exception) -> None:
        """Registra que el archivo no pasó la validación previa al XML."""
        ...

    @abstractmethod
    def log_document_built(
        self, message_id: str, number_of_transactions: int, control_sum_cents: int
    ) -> None:
        """Registra el fin exitoso de la generación del XML.

        Args:
            message_id: MsgId del encabezado de grupo.
            number_of_transactions: NbOfTxs del documento.
            control_sum_cents: CtrlSum del documento, en centavos.
        """
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen del armado.

        Returns:
            Diccionario con métricas:
            {
                'pagos_agregados': int,
                'transferencias_agregadas': int,
                'total_centavos': int,
                'documentos_generados': int,
                'errores': List[str],
            }
        """
        ...
