"""
Adaptador de salida: Logger a consola.

Implementación simple de AssemblyLogger que imprime eventos a stdout con
un formato consistente y lleva contadores para el resumen final.

Útil para:
- Desarrollo y debugging.
- Ejecución manual desde un script o notebook.
"""

from sepa_builder.domain.ports.assembly_logger import AssemblyLogger
from sepa_builder.domain.shared.money import format_cents


class ConsoleLogger(AssemblyLogger):
    """Logger que imprime eventos de armado a consola."""

    def __init__(self) -> None:
        self._pagos_agregados: int = 0
        self._transferencias_agregadas: int = 0
        self._total_centavos: int = 0
        self._documentos_generados: int = 0
        self._errores: list[str] = []

    # --- Armado ---

    def log_payment_added(self, payment_name: str, payment_id: str) -> None:
        self._pagos_agregados += 1
        print(f"  📦 Pago agregado: {payment_name} ({payment_id})")

    def log_transfer_added(self, payment_name: str, end_to_end_id: str, amount_cents: int) -> None:
        self._transferencias_agregadas += 1
        self._total_centavos += amount_cents
        print(f"  ➕ Transferencia {end_to_end_id}: {format_cents(amount_cents)} — {payment_name}")

    # --- Generación ---

    def log_validation_failed(self, error: Exception) -> None:
        self._errores.append(str(error))
        print(f"  ❌ Validación fallida: {error}")

    def log_document_built(
        self, message_id: str, number_of_transactions: int, control_sum_cents: int
    ) -> None:
        self._documentos_generados += 1
        print(
            f"  ✅ Documento {message_id} generado — "
            f"{number_of_transactions} transacciones, total {format_cents(control_sum_cents)}"
        )

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "pagos_agregados": self._pagos_agregados,
            "transferencias_agregadas": self._transferencias_agregadas,
            "total_centavos": self._total_centavos,
            "documentos_generados": self._documentos_generados,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del armado."""
        print("\n" + "=" * 60)
        print("RESUMEN DE ARMADO SEPA")
        print("=" * 60)
        print(f"  Pagos agregados:          {self._pagos_agregados}")
        print(f"  Transferencias agregadas: {self._transferencias_agregadas}")
        print(f"  Total:                    {format_cents(self._total_centavos)}")
        print(f"  Documentos generados:     {self._documentos_generados}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err}")

        print("=" * 60)
