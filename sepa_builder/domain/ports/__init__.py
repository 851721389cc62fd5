"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from sepa_builder.domain.ports import DomBuilder, AssemblyLogger
"""

from sepa_builder.domain.ports.assembly_logger import AssemblyLogger
from sepa_builder.domain.ports.dom_builder import DomBuilder

__all__ = [
    "AssemblyLogger",
    "DomBuilder",
]
