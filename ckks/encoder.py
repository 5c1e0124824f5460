"""
Codificador CKKS: canonical embedding, projeção e discretização.

Esta classe fornece a interface de alto nível para codificar vetores de
números complexos em polinômios de R = ℤ[X]/(X^N + 1) e decodificá-los.

Pipeline de codificação:  z → π^(-1) → ·Δ → σ^(-1) → arredondamento
Pipeline de decodificação: p → σ → /Δ → π
"""

import logging

import numpy as np

from .basis import RootBasis
from .constants import CKKSCryptographicParameters
from .plaintext import CKKSPlaintext

logger = logging.getLogger(__name__)


class CKKSEncoder:
    """
    Codificador do esquema CKKS.

    A instância é imutável após a construção: a base de raízes e o fator
    de escala são calculados uma única vez e podem ser compartilhados
    para leitura.
    """

    def __init__(self, poly_degree: int = 4, precision_bits: int = 64):
        """
        Inicializa o codificador.

        Args:
            poly_degree: N, grau do polinômio (potência de dois >= 2)
            precision_bits: log2(Δ), bits do fator de escala

        Raises:
            ValueError: Se N não for potência de dois >= 2
        """
        self.crypto_params = CKKSCryptographicParameters(poly_degree, precision_bits)

        N = self.crypto_params.POLYNOMIAL_DEGREE
        self.M = self.crypto_params.M
        self.scale = self.crypto_params.SCALING_FACTOR

        self._basis = RootBasis(N)
        self.xi = self._basis.unity

        logger.debug(
            "CKKSEncoder inicializado: N=%d, M=%d, Δ=2^%d",
            N,
            self.M,
            self.crypto_params.logp,
        )

    @classmethod
    def from_params(cls, crypto_params: CKKSCryptographicParameters) -> "CKKSEncoder":
        """Cria um codificador a partir de um objeto de parâmetros."""
        return cls(crypto_params.POLYNOMIAL_DEGREE, crypto_params.logp)

    @property
    def N(self) -> int:
        return self.crypto_params.POLYNOMIAL_DEGREE

    def get_unity(self) -> complex:
        """Retorna a raiz primitiva M-ésima ξ = e^(iπ/N)."""
        return self.xi

    def get_basis(self) -> np.ndarray:
        """
        Retorna a base σ(R), somente leitura.

        B[k][j] = ξ^((2j+1)k): a linha k é σ(X^k).
        """
        return self._basis.matrix

    def _as_vector(self, values, length: int, name: str) -> np.ndarray:
        vector = np.asarray(values, dtype=np.complex128)
        if vector.ndim != 1 or len(vector) != length:
            raise ValueError(
                f"{name} deve ter tamanho {length}, recebido: {vector.shape}"
            )
        return vector

    def sigma(self, coeffs) -> np.ndarray:
        """
        Aplica o canonical embedding σ: R → ℂ^N.

        Avalia o polinômio nas raízes ξ^(2j+1) para j = 0, ..., N-1.

        Args:
            coeffs: Coeficientes do polinômio (tamanho N)

        Returns:
            np.ndarray: Vetor em ℂ^N com σ(p)[j] = p(ξ^(2j+1))
        """
        coeffs = self._as_vector(coeffs, self.N, "Vetor de coeficientes")

        return self._basis.evaluation_matrix @ coeffs

    def sigma_inverse(self, values) -> np.ndarray:
        """
        Aplica o inverso do canonical embedding σ^(-1): ℂ^N → R.

        Resolve o sistema de Vandermonde V · coeffs = values. Para entrada
        com simetria conjugada o resultado é real a menos de erro de
        ponto flutuante; isso não é verificado.

        Args:
            values: Vetor em ℂ^N

        Returns:
            np.ndarray: Coeficientes complexos do polinômio (tamanho N)

        Raises:
            np.linalg.LinAlgError: Se o sistema for singular
        """
        values = self._as_vector(values, self.N, "Vetor de avaliações")

        return np.linalg.solve(self._basis.evaluation_matrix, values)

    def pi(self, z) -> np.ndarray:
        """
        Projeção canônica π: H → ℂ^(N/2).

        Mantém um representante de cada par conjugado.

        Args:
            z: Vetor em H (tamanho N)

        Returns:
            np.ndarray: As primeiras N/2 componentes de z
        """
        z = self._as_vector(z, self.N, "Vetor do espaço H")

        return z[: self.N // 2].copy()

    def pi_inverse(self, z) -> np.ndarray:
        """
        Inverso da projeção π^(-1): ℂ^(N/2) → H.

        Expande um vetor z ∈ ℂ^(N/2) aplicando a simetria hermitiana:
        resultado = [z[0], ..., z[N/2-1], conj(z[N/2-1]), ..., conj(z[0])]

        Args:
            z: Vetor em ℂ^(N/2)

        Returns:
            np.ndarray: Vetor em H com simetria hermitiana (tamanho N)
        """
        z = self._as_vector(z, self.N // 2, "Vetor de slots")

        # Concatena z com seu conjugado reverso
        return np.concatenate([z, np.conjugate(z[::-1])])

    def encode(self, z) -> CKKSPlaintext:
        """
        Codifica um vetor de N/2 números complexos em um plaintext.

        Passos:
        1. π^(-1)(z): expande para H com simetria hermitiana
        2. Escala por Δ
        3. σ^(-1): obtém coeficientes (reais, pela simetria)
        4. Arredonda cada coeficiente para o inteiro mais próximo
           (meio para par, erro <= 0.5 por coeficiente)

        Args:
            z: Vetor em ℂ^(N/2)

        Returns:
            CKKSPlaintext: Plaintext com coeficientes inteiros

        Raises:
            ValueError: Se z não tiver N/2 componentes
            np.linalg.LinAlgError: Se o sistema de σ^(-1) for singular
        """
        expanded = self.pi_inverse(z)

        scaled = self.scale * expanded

        coeffs = self.sigma_inverse(scaled)

        rounded = np.rint(np.real(coeffs))

        return CKKSPlaintext(rounded, crypto_params=self.crypto_params, scale=self.scale)

    def decode(self, plaintext) -> np.ndarray:
        """
        Decodifica um plaintext em um vetor de N/2 números complexos.

        Passos:
        1. σ(p): avalia o polinômio nas raízes
        2. Divide por Δ
        3. π: projeta de H para ℂ^(N/2)

        Produtos de plaintexts têm escala Δ² e não são corrigidos aqui.

        Args:
            plaintext: CKKSPlaintext ou vetor de N coeficientes

        Returns:
            np.ndarray: Vetor em ℂ^(N/2)
        """
        if isinstance(plaintext, CKKSPlaintext):
            coeffs = plaintext.coefficients
        else:
            coeffs = plaintext

        z = self.sigma(coeffs)

        rescaled_z = z / self.scale

        return self.pi(rescaled_z)

    def encode_real(self, real_vector) -> CKKSPlaintext:
        """
        Codifica um vetor de números reais.

        Vetores menores que N/2 são completados com zeros.

        Args:
            real_vector: Vetor de números reais (tamanho <= N/2)

        Returns:
            CKKSPlaintext: Plaintext codificado

        Raises:
            ValueError: Se o vetor tiver mais de N/2 elementos
        """
        max_slots = self.crypto_params.get_maximum_plaintext_slots()

        input_array = np.asarray(real_vector, dtype=np.float64)
        if input_array.ndim != 1:
            raise ValueError(f"Vetor de entrada deve ser unidimensional: {input_array.shape}")
        if len(input_array) > max_slots:
            raise ValueError(
                f"Vetor de entrada tem {len(input_array)} elementos, "
                f"máximo de slots: {max_slots}"
            )
        if len(input_array) < max_slots:
            logger.warning(
                "Vetor de entrada completado com zeros de %d para %d elementos",
                len(input_array),
                max_slots,
            )
            input_array = np.pad(
                input_array, (0, max_slots - len(input_array)), mode="constant"
            )

        return self.encode(input_array.astype(np.complex128))

    def decode_real(self, plaintext) -> np.ndarray:
        """Decodifica um plaintext e retorna a parte real dos slots."""
        return np.real(self.decode(plaintext))

    def compute_basis_coordinates(self, z) -> np.ndarray:
        """
        Calcula as coordenadas de z com relação à base ortogonal σ(R).

        Para cada vetor base b_k = σ(X^k): coord_k = Re(<z, b_k> / <b_k, b_k>),
        com <·, ·> o produto interno hermitiano.

        Args:
            z: Vetor em H (tamanho N)

        Returns:
            np.ndarray: Coordenadas reais em relação à base σ(R)
        """
        z = self._as_vector(z, self.N, "Vetor do espaço H")
        basis = self.get_basis()

        # <z, b_k> = Σ_j z_j·conj(b_k[j]);  <b_k, b_k> = N
        inner = np.conjugate(basis) @ z
        norms = np.real(np.sum(basis * np.conjugate(basis), axis=1))

        return np.real(inner / norms)

    @staticmethod
    def coordinate_wise_random_rounding(coordinates, rng=None) -> np.ndarray:
        """
        Arredonda coordenadas randomicamente.

        Para cada coordenada c com parte fracionária r = c - floor(c),
        arredonda para ceil com probabilidade r e para floor com
        probabilidade 1 - r.

        Args:
            coordinates: Coordenadas reais
            rng: np.random.Generator (cria um novo se None)

        Returns:
            np.ndarray: Coordenadas arredondadas (float64 com valores inteiros)
        """
        if rng is None:
            rng = np.random.default_rng()

        coordinates = np.asarray(coordinates, dtype=np.float64)
        floor = np.floor(coordinates)
        r = coordinates - floor

        return floor + (rng.random(len(coordinates)) < r)

    def sigma_R_discretization(self, z, rng=None) -> np.ndarray:
        """
        Projeta um vetor z ∈ H no reticulado σ(R).

        1. Calcula as coordenadas de z na base σ(R)
        2. Arredonda as coordenadas (meio para par, ou randomicamente se rng)
        3. Recombina: Σ round(coord_k)·σ(X^k)

        Args:
            z: Vetor em H (tamanho N)
            rng: np.random.Generator para arredondamento aleatório (opcional)

        Returns:
            np.ndarray: Vetor em σ(R) próximo de z
        """
        coordinates = self.compute_basis_coordinates(z)

        if rng is None:
            rounded = np.rint(coordinates)
        else:
            rounded = self.coordinate_wise_random_rounding(coordinates, rng)

        return rounded @ self.get_basis()

    def print_summary(self):
        """Imprime um resumo do codificador."""
        print("=== CODIFICADOR CKKS ===")
        print(f"N = {self.N}, M = {self.M}")
        print(f"ξ = {self.xi:.6f}")
        print(f"Δ = 2^{self.crypto_params.logp}")
        print(f"Slots: {self.crypto_params.get_maximum_plaintext_slots()}")
        print("=" * 24)


# Função de conveniência para criar instância do codificador
def create_ckks_encoder(
    crypto_params: CKKSCryptographicParameters = None,
) -> CKKSEncoder:
    """
    Cria uma nova instância do codificador CKKS.

    Args:
        crypto_params: Parâmetros de codificação (usa padrão se None)

    Returns:
        CKKSEncoder: Nova instância do codificador
    """
    if crypto_params is None:
        crypto_params = CKKSCryptographicParameters()
    return CKKSEncoder.from_params(crypto_params)


if __name__ == "__main__":
    print("Exemplo de uso do CKKSEncoder:")

    encoder = create_ckks_encoder(CKKSCryptographicParameters.slots_config())
    encoder.print_summary()

    data = [1.5, -2.3, 3.7, 0.0]
    plaintext = encoder.encode_real(data)
    print(f"✓ Codificação realizada: {plaintext.coefficients}")

    decoded = encoder.decode_real(plaintext)
    print(f"✓ Decodificação realizada: {decoded}")
