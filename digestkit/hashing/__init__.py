"""
Hash algorithm strategies and the algorithm catalog.

Each algorithm is a HashStrategy; the catalog wraps strategies in
AlgorithmDescriptor entries keyed by name.
"""

from .registry import AlgorithmCatalog, AlgorithmDescriptor
from .strategies import (
    CORE_STRATEGIES,
    EXTENDED_STRATEGIES,
    HashStrategy,
    MD2Strategy,
    MD4Strategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)

__all__ = [
    "CORE_STRATEGIES",
    "EXTENDED_STRATEGIES",
    "AlgorithmCatalog",
    "AlgorithmDescriptor",
    "HashStrategy",
    "MD2Strategy",
    "MD4Strategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
]
