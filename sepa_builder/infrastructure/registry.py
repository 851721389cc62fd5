"""
Registro de DOM builders disponibles.

Centraliza la relación tipo_de_archivo → fábrica de DomBuilder.
Agregar un nuevo tipo de documento requiere solo 2 pasos:
1. Crear el TransferFile y el DomBuilder que lo renderiza.
2. Registrarlos aquí con register() o en create_default_registry().

El facade no sabe qué builder concreto corresponde a cada archivo: solo
pide "dame un builder para este archivo" y el registro se lo da.
"""

from collections.abc import Callable

from sepa_builder.domain.exceptions import InvalidTransferTypeError
from sepa_builder.domain.models.transfer_file import TransferFile
from sepa_builder.domain.ports.dom_builder import DomBuilder

BuilderFactory = Callable[[], DomBuilder]


class DomBuilderRegistry:
    """Registro de builders por tipo de TransferFile."""

    def __init__(self) -> None:
        self._factories: dict[type[TransferFile], BuilderFactory] = {}

    def register(self, file_type: type[TransferFile], factory: BuilderFactory) -> None:
        """Registra la fábrica de builders de un tipo de archivo.

        Args:
            file_type: Subclase concreta de TransferFile.
            factory: Callable sin argumentos que devuelve un DomBuilder nuevo
                     (normalmente la clase del builder).

        Raises:
            ValueError: Si ya existe un builder para ese tipo de archivo.
        """
        if file_type in self._factories:
            raise ValueError(
                f"Ya existe un builder registrado para '{file_type.__name__}'. "
                f"No se puede registrar otro."
            )
        self._factories[file_type] = factory

    def create(self, transfer_file: TransferFile) -> DomBuilder:
        """Crea un builder nuevo para el archivo.

        Busca por el tipo exacto y luego por sus clases base, así una
        subclase de un archivo registrado usa el builder de su padre.

        Raises:
            InvalidTransferTypeError: Si ningún builder admite ese archivo.
        """
        for file_type in type(transfer_file).__mro__:
            factory = self._factories.get(file_type)
            if factory is not None:
                return factory()
        raise InvalidTransferTypeError(
            f"uno de {self.available_file_types}", type(transfer_file).__name__
        )

    @property
    def available_file_types(self) -> list[str]:
        """Nombres de los tipos de archivo con builder disponible."""
        return sorted(file_type.__name__ for file_type in self._factories)

    def __len__(self) -> int:
        return len(self._factories)


def create_default_registry() -> DomBuilderRegistry:
    """Crea un registro con los builders de pain.001 y pain.008.

    Returns:
        DomBuilderRegistry con ambos tipos de archivo registrados.
    """
    from sepa_builder.adapters.output.dom_builders.credit_transfer_dom_builder import (
        CustomerCreditTransferDomBuilder,
    )
    from sepa_builder.adapters.output.dom_builders.direct_debit_dom_builder import (
        CustomerDirectDebitTransferDomBuilder,
    )
    from sepa_builder.domain.models.transfer_file import (
        CustomerCreditTransferFile,
        CustomerDirectDebitTransferFile,
    )

    registry = DomBuilderRegistry()
    registry.register(CustomerCreditTransferFile, CustomerCreditTransferDomBuilder)
    registry.register(CustomerDirectDebitTransferFile, CustomerDirectDebitTransferDomBuilder)
    return registry
