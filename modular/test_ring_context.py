from .ring_context import RingContext, RingElement
from .gf_context import GFContext
import numpy as np
import pytest


class TestRingContext:
    """Testes para o contexto de resíduos"""

    def test_ring_congruence(self):
        """Elementos congruentes módulo m são iguais"""
        ring5 = RingContext(5)

        assert ring5.elm(0) == ring5.elm(5)
        assert ring5.elm(1) == ring5.elm(21)
        assert ring5.elm(2) == ring5.elm(17)
        assert ring5.elm(3) == ring5.elm(73)
        assert ring5.elm(4) == ring5.elm(104)

    def test_non_prime_modulus(self):
        """Módulos compostos são aceitos"""
        ring16 = RingContext(16)

        assert ring16.elm(3) == ring16.elm(19)
        assert ring16.elm(-1) == ring16.elm(15)
        assert ring16.elm(8) != ring16.elm(0)
        assert ring16.elm(35).value == 3

    def test_exponents_of_root_of_unity(self):
        """Expoentes (2j+1)·k de ξ comparados módulo M = 2N"""
        ring8 = RingContext(8)

        # ξ^((2·3+1)·2) = ξ^14 = ξ^6 para M = 8
        assert ring8.elm((2 * 3 + 1) * 2) == ring8.elm(6)

    def test_modulus_one(self):
        """ℤ/1ℤ tem um único elemento"""
        ring1 = RingContext(1)

        assert ring1.elm(42) == ring1.elm(0)

    def test_no_arithmetic_or_inverse(self):
        """O anel só oferece redução e igualdade"""
        x = RingContext(6).elm(5)

        assert not hasattr(x, "inv")
        with pytest.raises(TypeError):
            x + x

    def test_equality_across_moduli_and_types(self):
        """Módulos diferentes ou elementos de corpo nunca são iguais"""
        assert RingContext(5).elm(2) != RingContext(7).elm(2)
        assert RingContext(5).elm(2) != GFContext(5).elm(2)
        assert RingElement(7, 5) == RingContext(5).elm(2)
        assert int(RingContext(5).elm(7)) == 2

    def test_non_integer_values_are_rejected(self):
        """Floats não são truncados silenciosamente"""
        ring6 = RingContext(6)

        with pytest.raises(ValueError, match="deve ser inteiro"):
            ring6.elm(2.7)

        with pytest.raises(ValueError, match="deve ser inteiro"):
            RingContext(6.0)

        assert ring6.elm(np.int64(8)) == ring6.elm(2)

    def test_invalid_modulus(self):
        """O módulo precisa ser positivo"""
        with pytest.raises(ValueError, match="Módulo do anel"):
            RingContext(0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
