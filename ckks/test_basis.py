"""
Testes para a base de raízes da unidade.
"""

import numpy as np
import pytest

from .basis import RootBasis, vandermonde

E = 1e-10


class TestVandermonde:
    """Testes para a matriz de Vandermonde"""

    def test_shape_and_first_column(self):
        """A primeira coluna é ξ^0 = 1"""
        xi = np.exp(2j * np.pi / 16)
        matrix = vandermonde(xi, 16)

        assert matrix.shape == (8, 8)
        assert matrix.dtype == np.complex128
        np.testing.assert_allclose(matrix[:, 0], np.ones(8))

    def test_rows_are_powers_of_odd_roots(self):
        """Linha i contém as potências de ξ^(2i+1)"""
        xi = np.exp(2j * np.pi / 8)
        matrix = vandermonde(xi, 8)

        for i in range(4):
            root = xi ** (2 * i + 1)
            expected = np.array([root**j for j in range(4)])
            np.testing.assert_allclose(matrix[i], expected, atol=E)


class TestRootBasis:
    """Testes para a classe RootBasis"""

    def setup_method(self):
        """Configuração executada antes de cada teste"""
        self.basis = RootBasis(8)

    def test_unity(self):
        """ξ = e^(iπ/N) e ξ^N = -1"""
        xi = self.basis.unity

        assert abs(xi - np.exp(1j * np.pi / 8)) < E
        assert abs(xi**8 + 1) < E
        assert self.basis.M == 16

    def test_matrix_entries(self):
        """B[k][j] = ξ^((2j+1)k)"""
        xi = self.basis.unity
        B = self.basis.matrix

        for k in range(8):
            for j in range(8):
                assert abs(B[k, j] - xi ** ((2 * j + 1) * k)) < 1e-9

    def test_matrix_is_read_only(self):
        """A base não pode ser alterada"""
        with pytest.raises(ValueError):
            self.basis.matrix[0, 0] = 0

    def test_rows_are_orthogonal(self):
        """<σ(X^i), σ(X^j)> = N·δ_ij"""
        B = self.basis.matrix
        gram = B @ np.conjugate(B).T

        np.testing.assert_allclose(gram, 8 * np.eye(8), atol=1e-9)

    def test_roots_come_in_conjugate_pairs(self):
        """ξ^(2(N-1-j)+1) = conj(ξ^(2j+1))"""
        for j in range(8):
            assert abs(self.basis.root(7 - j) - np.conjugate(self.basis.root(j))) < E

    def test_root_out_of_range(self):
        """Índices fora de [0, N) são rejeitados"""
        with pytest.raises(IndexError, match="fora do alcance"):
            self.basis.root(8)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
