# Pacote de aritmética modular

from .exceptions import ModulusMismatchError, NoInverseError
from .gf_context import GFContext, GFElement
from .ring_context import RingContext, RingElement

__all__ = [
    "GFContext",
    "GFElement",
    "RingContext",
    "RingElement",
    "ModulusMismatchError",
    "NoInverseError",
]
