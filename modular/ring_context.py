"""
Contexto de resíduos ℤ/mℤ para m qualquer.

Usado onde expoentes ou índices precisam ser comparados módulo m sem
supor estrutura de corpo. Só oferece redução e igualdade.
"""

import numbers


def as_integer(value, name: str = "Valor") -> int:
    """
    Converte value para int sem truncar.

    Raises:
        ValueError: Se value não for inteiro (floats são rejeitados)
    """
    if not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} deve ser inteiro, recebido: {value!r}")
    return int(value)


class RingElement:
    """
    Classe de resíduo de ℤ/mℤ.

    Invariante: 0 <= value < modulus. Não há inverso multiplicativo.
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

    def __eq__(self, other):
        if not isinstance(other, RingElement):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self):
        return hash((RingElement, self._value, self._modulus))

    def __int__(self):
        return self._value

    def __repr__(self):
        return f"RingElement({self._value}, {self._modulus})"


class RingContext:
    """Contexto de ℤ/mℤ: fábrica de resíduos com módulo m fixo."""

    __slots__ = ("_m",)

    def __init__(self, m: int):
        m = as_integer(m, "Módulo do anel")
        if m < 1:
            raise ValueError(f"Módulo do anel deve ser positivo, recebido: {m}")
        self._m = m

    @property
    def modulus(self) -> int:
        return self._m

    def elm(self, n: int) -> RingElement:
        """Retorna o representante canônico de n em [0, m)."""
        return RingElement(n, self._m)

    def __eq__(self, other):
        if not isinstance(other, RingContext):
            return NotImplemented
        return self._m == other._m

    def __hash__(self):
        return hash((RingContext, self._m))

    def __repr__(self):
        return f"RingContext({self._m})"
