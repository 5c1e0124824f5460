"""
Classe para representar plaintexts do esquema CKKS.

Um plaintext é um polinômio de R = ℤ[X]/(X^N + 1) cujos coeficientes
inteiros resultam da codificação de um vetor de slots, junto com a escala
com que foi produzido.
"""

import numpy as np
from numpy.polynomial import Polynomial
from typing import Optional
from .constants import CKKSCryptographicParameters


class CKKSPlaintext:
    """
    Classe que representa um plaintext do esquema CKKS.

    Attributes:
        coefficients: Coeficientes inteiros (armazenados em float64) de grau < N
        scale: Fator de escala acumulado (Δ após encode, Δ² após uma multiplicação)
        crypto_params: Instância dos parâmetros de codificação
    """

    def __init__(
        self,
        coefficients,
        crypto_params: Optional[CKKSCryptographicParameters] = None,
        scale: Optional[float] = None,
    ):
        """
        Inicializa um novo plaintext CKKS.

        Args:
            coefficients: Vetor com os N coeficientes do polinômio
            crypto_params: Parâmetros de codificação (usa instância padrão se None)
            scale: Fator de escala (usa SCALING_FACTOR se None)

        Raises:
            ValueError: Se os parâmetros estiverem inválidos
        """
        if crypto_params is None:
            crypto_params = CKKSCryptographicParameters()

        self.crypto_params = crypto_params

        coefficients = np.array(coefficients, dtype=np.float64)
        self._validate_initialization_params(coefficients, scale)

        if scale is None:
            self.scale = self.crypto_params.SCALING_FACTOR
        else:
            self.scale = float(scale)

        coefficients.setflags(write=False)
        self.coefficients = coefficients

    def _validate_initialization_params(self, coefficients: np.ndarray, scale):
        """Valida os parâmetros de inicialização."""
        N = self.crypto_params.POLYNOMIAL_DEGREE
        if coefficients.ndim != 1 or len(coefficients) != N:
            raise ValueError(
                f"Plaintext deve ter exatamente {N} coeficientes, "
                f"recebido: {coefficients.shape}"
            )

        if scale is not None and scale <= 0:
            raise ValueError("Escala deve ser positiva")

    @property
    def degree(self) -> int:
        """Retorna N, o número de coeficientes."""
        return self.crypto_params.POLYNOMIAL_DEGREE

    def __len__(self):
        return len(self.coefficients)

    def is_fresh(self) -> bool:
        """
        Verifica se é um plaintext recém-codificado.

        Um plaintext é "fresh" se a escala é igual ao SCALING_FACTOR,
        isto é, não resultou de uma multiplicação.
        """
        return self.scale == self.crypto_params.SCALING_FACTOR

    def can_add_with(self, other: "CKKSPlaintext") -> bool:
        """
        Verifica se é possível somar com outro plaintext.

        Args:
            other: Outro plaintext CKKS

        Returns:
            bool: True se grau e escala coincidem
        """
        return self.degree == other.degree and self.scale == other.scale

    def can_multiply_with(self, other: "CKKSPlaintext") -> bool:
        return self.degree == other.degree

    def copy(self) -> "CKKSPlaintext":
        """Cria uma cópia do plaintext."""
        return CKKSPlaintext(
            coefficients=self.coefficients.copy(),
            crypto_params=self.crypto_params,
            scale=self.scale,
        )

    def as_polynomial(self) -> Polynomial:
        """
        Retorna o plaintext como Polynomial do NumPy.

        Returns:
            Polynomial: p(X) = Σ coefficients[k]·X^k
        """
        return Polynomial(self.coefficients.copy())

    def print_summary(self):
        """Imprime um resumo do plaintext."""
        print("=== RESUMO DO PLAINTEXT CKKS ===")
        print(f"Número de coeficientes: {len(self)}")
        print(f"Escala: {self.scale:.2e}")
        print(f"Status: {'Fresh' if self.is_fresh() else 'Processado'}")
        print(f"max |coef| = {np.max(np.abs(self.coefficients)):.2e}")
        print("=" * 32)

    @staticmethod
    def add(pt1: "CKKSPlaintext", pt2: "CKKSPlaintext") -> "CKKSPlaintext":
        """
        Soma dois plaintexts coeficiente a coeficiente.

        σ é linear, logo decode(pt1 + pt2) ≈ decode(pt1) + decode(pt2).

        Raises:
            ValueError: Se os plaintexts não são compatíveis para adição
        """
        if not pt1.can_add_with(pt2):
            raise ValueError(
                f"Plaintexts não são compatíveis para adição. "
                f"pt1: degree={pt1.degree}, scale={pt1.scale}; "
                f"pt2: degree={pt2.degree}, scale={pt2.scale}"
            )

        return CKKSPlaintext(
            coefficients=pt1.coefficients + pt2.coefficients,
            crypto_params=pt1.crypto_params,
            scale=pt1.scale,
        )

    @staticmethod
    def multiply(pt1: "CKKSPlaintext", pt2: "CKKSPlaintext") -> "CKKSPlaintext":
        """
        Multiplica dois plaintexts no anel ℤ[X]/(X^N + 1).

        σ é um homomorfismo de anéis: σ(p1·p2) = σ(p1) ⊙ σ(p2). A escala do
        resultado é o produto das escalas (Δ²). Não há rescale: decode divide
        apenas por Δ, então o resultado decodificado fica multiplicado por Δ.

        Raises:
            ValueError: Se os graus forem diferentes
        """
        if not pt1.can_multiply_with(pt2):
            raise ValueError(
                f"Plaintexts não são compatíveis para multiplicação. "
                f"pt1: degree={pt1.degree}; pt2: degree={pt2.degree}"
            )

        coeffs = CKKSCryptographicParameters.poly_mul_mod(
            pt1.coefficients, pt2.coefficients, pt1.degree
        )

        return CKKSPlaintext(
            coefficients=coeffs,
            crypto_params=pt1.crypto_params,
            scale=pt1.scale * pt2.scale,
        )

    def __add__(self, other):
        if not isinstance(other, CKKSPlaintext):
            return NotImplemented
        return CKKSPlaintext.add(self, other)

    def __mul__(self, other):
        if not isinstance(other, CKKSPlaintext):
            return NotImplemented
        return CKKSPlaintext.multiply(self, other)

    def __repr__(self):
        return f"CKKSPlaintext(N={self.degree}, scale={self.scale:.2e})"
