"""
Base de raízes da unidade para o canonical embedding.

Contém a raiz primitiva M-ésima ξ = e^(iπ/N) e a matriz de Vandermonde
das potências ímpares de ξ, usadas por σ e σ^(-1).
"""

import numpy as np


def vandermonde(xi: complex, M: int) -> np.ndarray:
    """
    Cria a matriz de Vandermonde para o canonical embedding.

    A linha i corresponde às potências de ξ^(2i+1):
    [1, ξ^(2i+1), ξ^(2(2i+1)), ..., ξ^((N-1)(2i+1))]

    Os expoentes são reduzidos módulo M antes da exponenciação, já que
    ξ^M = 1; isso evita acumular erro de ponto flutuante em potências altas.

    Args:
        xi: Raiz primitiva M-ésima da unidade ξ = e^(2πi/M)
        M: Ordem da raiz (M = 2N para X^N + 1)

    Returns:
        Matriz de Vandermonde N × N
    """
    N = M // 2
    roots = 2 * np.arange(N) + 1
    powers = np.arange(N)

    # expoente[i, j] = (2i+1)·j mod M
    exponents = np.outer(roots, powers) % M
    angles = np.angle(xi) * exponents

    return np.exp(1j * angles).astype(np.complex128)


class RootBasis:
    """
    Valor imutável com a raiz primitiva e a base σ(R).

    Attributes:
        N: Grau do polinômio
        M: Ordem da raiz primitiva (2N)
        unity: ξ = e^(iπ/N)
        matrix: B com B[k][j] = ξ^((2j+1)k); a linha k é σ(X^k)
    """

    def __init__(self, N: int):
        self._N = N
        self._M = 2 * N
        self._unity = complex(np.exp(1j * np.pi / N))

        # Transposta da Vandermonde: cada linha é σ(X^k)
        matrix = np.ascontiguousarray(vandermonde(self._unity, self._M).T)
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def N(self) -> int:
        return self._N

    @property
    def M(self) -> int:
        return self._M

    @property
    def unity(self) -> complex:
        return self._unity

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def evaluation_matrix(self) -> np.ndarray:
        """Vandermonde V = Bᵀ: (V·c)[j] = p(ξ^(2j+1))."""
        return self._matrix.T

    def root(self, j: int) -> complex:
        """Retorna a j-ésima raiz de avaliação ξ^(2j+1)."""
        if j < 0 or j >= self._N:
            raise IndexError(f"Índice {j} fora do alcance. A base tem {self._N} raízes.")
        return complex(np.exp(1j * np.pi * ((2 * j + 1) % self._M) / self._N))

    def __repr__(self):
        return f"RootBasis(N={self._N}, M={self._M})"
