"""
Contexto de corpo primo GF(p) = ℤ/pℤ.

Usado para validar a aritmética de expoentes e índices módulo um primo.
A primalidade de p não é verificada: com p composto os resultados de
inv() e da divisão não são definidos.
"""

import numbers

from .exceptions import ModulusMismatchError, NoInverseError
from .ring_context import as_integer


def extended_gcd(a: int, b: int):
    """
    Algoritmo de Euclides estendido.

    Returns:
        tuple: (g, x, y) com a·x + b·y = g = mdc(a, b)
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    return old_r, old_x, old_y


class GFElement:
    """
    Elemento de GF(p).

    Invariante: 0 <= value < modulus. Operações só são definidas entre
    elementos do mesmo módulo; inteiros são promovidos para o corpo do
    outro operando.
    """

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: int, modulus: int):
        self._modulus = as_integer(modulus, "Módulo")
        self._value = as_integer(value) % self._modulus

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    def _coerce(self, other) -> "GFElement":
        if isinstance(other, GFElement):
            if other._modulus != self._modulus:
                raise ModulusMismatchError(self._modulus, other._modulus)
            return other
        if isinstance(other, numbers.Integral):
            return GFElement(other, self._modulus)
        return NotImplemented

    def inv(self) -> "GFElement":
        """
        Inverso multiplicativo.

        Raises:
            NoInverseError: Se o elemento for zero
        """
        g, x, _ = extended_gcd(self._value, self._modulus)
        if self._value == 0 or g != 1:
            raise NoInverseError(self._value, self._modulus)
        return GFElement(x, self._modulus)

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return GFElement(self._value + other._value, self._modulus)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return GFElement(self._value - other._value, self._modulus)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return GFElement(other._value - self._value, self._modulus)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return GFElement(self._value * other._value, self._modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inv()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other * self.inv()

    def __neg__(self):
        return GFElement(-self._value, self._modulus)

    def __pow__(self, exponent: int):
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inv() ** (-exponent)
        return GFElement(pow(self._value, exponent, self._modulus), self._modulus)

    def __eq__(self, other):
        if not isinstance(other, GFElement):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self):
        return hash((GFElement, self._value, self._modulus))

    def __int__(self):
        return self._value

    def __repr__(self):
        return f"GFElement({self._value}, {self._modulus})"


class GFContext:
    """
    Contexto de GF(p): fábrica de elementos com módulo p fixo.
    """

    __slots__ = ("_p",)

    def __init__(self, p: int):
        p = as_integer(p, "Módulo do corpo")
        if p < 2:
            raise ValueError(f"Módulo do corpo deve ser >= 2, recebido: {p}")
        self._p = p

    @property
    def modulus(self) -> int:
        return self._p

    def elm(self, n: int) -> GFElement:
        """Retorna o representante canônico de n em [0, p)."""
        return GFElement(n, self._p)

    def zero(self) -> GFElement:
        return self.elm(0)

    def one(self) -> GFElement:
        return self.elm(1)

    def __eq__(self, other):
        if not isinstance(other, GFContext):
            return NotImplemented
        return self._p == other._p

    def __hash__(self):
        return hash((GFContext, self._p))

    def __repr__(self):
        return f"GFContext({self._p})"
