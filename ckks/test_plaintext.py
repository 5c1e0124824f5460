from .plaintext import CKKSPlaintext
from .constants import CKKSCryptographicParameters
import pytest
from numpy.polynomial import Polynomial
import numpy as np


class TestCKKSPlaintext:
    """Testes para a classe CKKSPlaintext"""

    def setup_method(self):
        """Configuração executada antes de cada teste"""
        self.crypto_params = CKKSCryptographicParameters(poly_degree=4, precision_bits=10)
        self.p1 = CKKSPlaintext([1, 2, 3, 4], self.crypto_params)
        self.p2 = CKKSPlaintext([0, 1, 0, 0], self.crypto_params)

    def test_basic_creation(self):
        """Teste de criação básica de plaintext"""
        assert len(self.p1) == 4
        assert self.p1.degree == 4
        assert self.p1.scale == 1024.0
        assert self.p1.is_fresh()
        assert self.p1.coefficients.dtype == np.float64

    def test_invalid_creation(self):
        """Teste de criação com parâmetros inválidos"""
        with pytest.raises(ValueError, match="exatamente 4 coeficientes"):
            CKKSPlaintext([1, 2, 3], self.crypto_params)

        with pytest.raises(ValueError, match="Escala deve ser positiva"):
            CKKSPlaintext([1, 2, 3, 4], self.crypto_params, scale=-1.0)

    def test_coefficients_are_read_only(self):
        """Os coeficientes não podem ser alterados"""
        with pytest.raises(ValueError):
            self.p1.coefficients[0] = 10

    def test_add(self):
        """Soma coeficiente a coeficiente"""
        result = self.p1 + self.p2

        np.testing.assert_array_equal(result.coefficients, [1, 3, 3, 4])
        assert result.scale == self.p1.scale

    def test_add_scale_mismatch(self):
        """Plaintexts com escalas diferentes não podem ser somados"""
        product = self.p1 * self.p2

        with pytest.raises(ValueError, match="não são compatíveis para adição"):
            product + self.p1

    def test_multiply_is_negacyclic(self):
        """Multiplicar por X desloca os coeficientes com X^N = -1"""
        result = self.p1 * self.p2

        np.testing.assert_array_equal(result.coefficients, [-4, 1, 2, 3])
        assert result.scale == self.p1.scale**2
        assert not result.is_fresh()

    def test_multiply_degree_mismatch(self):
        """Graus diferentes são rejeitados"""
        other = CKKSPlaintext(
            np.zeros(8), CKKSCryptographicParameters(poly_degree=8, precision_bits=10)
        )

        with pytest.raises(ValueError, match="multiplicação"):
            self.p1 * other

    def test_copy_and_polynomial(self):
        """Cópia preserva coeficientes e escala"""
        clone = self.p1.copy()

        assert clone is not self.p1
        assert clone.scale == self.p1.scale
        np.testing.assert_array_equal(clone.coefficients, self.p1.coefficients)

        poly = self.p1.as_polynomial()
        assert isinstance(poly, Polynomial)
        assert poly(1.0) == 10.0

    def test_unsupported_operand(self):
        """Operações com tipos não suportados levantam TypeError"""
        with pytest.raises(TypeError):
            self.p1 + 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
