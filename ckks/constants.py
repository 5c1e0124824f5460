"""
Constantes centralizadas para a camada de codificação CKKS.

Esta classe organiza os parâmetros do codificador de forma semântica
para facilitar manutenção e configuração do sistema.

Configurações pré-definidas:
- Básica: N=4, logp=64 (4 raízes, 2 slots)
- Slots: N=8, logp=40
- Alta precisão: N=16, logp=52

Convenções:
- N = grau do polinômio (potência de dois)
- Nh = N/2 (número de slots)
- M = 2N (ordem da raiz primitiva da unidade)
- Δ = 2^logp (fator de escala)
"""

import numpy as np
from numpy.polynomial import Polynomial

# Maior expoente com 2^logp representável em float64
MAX_PRECISION_BITS = 1023


class CKKSCryptographicParameters:
    """
    Classe que centraliza todos os parâmetros da codificação CKKS.

    Esta classe organiza as constantes de forma semântica, separando:
    - Parâmetros estruturais (N, Nh, M)
    - Parâmetros de precisão (Δ)
    - Estruturas algébricas (X^N + 1)
    """

    def __init__(
        self,
        poly_degree: int = 4,  # N - grau do polinômio (potência de dois)
        precision_bits: int = 64,  # log2(Δ) - bits do fator de escala
    ):
        """
        Inicializa os parâmetros de codificação CKKS.

        Args:
            poly_degree: N - grau do polinômio ciclotômico X^N + 1
            precision_bits: log2(Δ) - log do fator de escala

        Raises:
            ValueError: Se N não for potência de dois >= 2 ou se
                precision_bits não for inteiro em [0, 1023]
        """
        # === PARÂMETROS ESTRUTURAIS ===
        self.POLYNOMIAL_DEGREE = poly_degree  # N
        self.logp = precision_bits

        self.validate_parameters()

        # Normaliza inteiros do NumPy para int do Python
        self.POLYNOMIAL_DEGREE = int(poly_degree)
        self.logp = int(precision_bits)

        self.logN = self.POLYNOMIAL_DEGREE.bit_length() - 1

        # Nh = N/2
        self.Nh = self.POLYNOMIAL_DEGREE >> 1

        # M = 2N
        self.M = self.POLYNOMIAL_DEGREE << 1

        # === PARÂMETROS DE ESCALA ===
        # Δ = 2^logp; float porque 2^64 não cabe em int64
        self.SCALING_FACTOR = float(2**self.logp)

    def validate_parameters(self):
        """
        Valida os parâmetros configurados.

        Raises:
            ValueError: Se algum parâmetro for inválido
        """
        n = self.POLYNOMIAL_DEGREE
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise ValueError(f"Grau do polinômio deve ser inteiro, recebido: {n!r}")
        if n < 2 or n & (n - 1) != 0:
            raise ValueError(
                f"Grau do polinômio deve ser potência de dois >= 2, recebido: {n}"
            )
        logp = self.logp
        if isinstance(logp, bool) or not isinstance(logp, (int, np.integer)):
            raise ValueError(f"Bits de precisão devem ser inteiros, recebido: {logp!r}")
        if logp < 0:
            raise ValueError(
                f"Bits de precisão devem ser não negativos, recebido: {logp}"
            )
        # 2^1024 não é representável em float64
        if logp > MAX_PRECISION_BITS:
            raise ValueError(
                f"Bits de precisão devem ser no máximo {MAX_PRECISION_BITS}, "
                f"recebido: {logp}"
            )

    # === ESTRUTURAS ALGÉBRICAS ===
    def get_polynomial_modulus_ring(self):
        """
        Retorna o polinômio ciclotômico X^N + 1.

        Returns:
            Polynomial: O polinômio ciclotômico X^N + 1
        """
        return Polynomial([1] + [0] * (self.POLYNOMIAL_DEGREE - 1) + [1])

    # === MÉTODOS DE ACESSO ===
    def get_maximum_plaintext_slots(self):
        """
        Retorna o número de slots disponíveis para dados do usuário.

        Returns:
            int: N/2
        """
        return self.Nh

    def get_scaling_factor(self):
        return self.SCALING_FACTOR

    @classmethod
    def basic_config(cls):
        """
        Configuração básica: N=4 (M=8), Δ=2^64.

        Returns:
            CKKSCryptographicParameters: Parâmetros para exemplos pequenos
        """
        return cls(poly_degree=4, precision_bits=64)

    @classmethod
    def slots_config(cls):
        """
        Configuração com 4 slots: N=8, Δ=2^40.

        Returns:
            CKKSCryptographicParameters: Parâmetros com mais slots
        """
        return cls(poly_degree=8, precision_bits=40)

    @classmethod
    def high_precision_config(cls):
        """
        Configuração de alta precisão: N=16, Δ=2^52.

        Returns:
            CKKSCryptographicParameters: Parâmetros para alta precisão
        """
        return cls(poly_degree=16, precision_bits=52)

    def print_parameters_summary(self):
        """
        Imprime um resumo dos parâmetros configurados.
        """
        print("=== PARÂMETROS DE CODIFICAÇÃO CKKS ===")
        print(f"logN: {self.logN} → N = 2^{self.logN} = {self.POLYNOMIAL_DEGREE}")
        print(f"M = 2N = {self.M}")
        print(f"logp: {self.logp} → Δ = 2^{self.logp} = {self.SCALING_FACTOR:.6e}")
        print(f"Slots disponíveis: {self.Nh} (Nh = N/2)")
        print("=" * 38)

    # === FUNÇÕES AUXILIARES PARA OPERAÇÕES POLINOMIAIS ===
    @staticmethod
    def poly_ring_mod(coeffs, degree):
        """
        Reduz um vetor de coeficientes módulo X^N + 1.

        Explora X^N ≡ -1: o coeficiente na posição i contribui para a
        posição i mod N com sinal (-1)^(i // N).

        Args:
            coeffs: Coeficientes do polinômio (qualquer tamanho)
            degree: N, grau do polinômio ciclotômico

        Returns:
            np.ndarray: Vetor de tamanho N com os coeficientes reduzidos
        """
        coeffs = np.asarray(coeffs)
        if len(coeffs) % degree != 0:
            coeffs = np.pad(coeffs, (0, degree - len(coeffs) % degree), mode="constant")

        # Cada bloco de N coeficientes multiplica X^(kN) = (-1)^k
        blocks = coeffs.reshape(-1, degree)
        signs = np.where(np.arange(len(blocks)) % 2 == 0, 1, -1)
        return signs @ blocks

    @staticmethod
    def poly_mul_mod(p1, p2, degree):
        """
        Multiplicação de polinômios no anel C[X]/(X^N + 1).

        Args:
            p1: Coeficientes do primeiro polinômio (tamanho N)
            p2: Coeficientes do segundo polinômio (tamanho N)
            degree: N, grau do polinômio ciclotômico

        Returns:
            np.ndarray: Coeficientes do produto reduzido (tamanho N)
        """
        full_poly = np.convolve(np.asarray(p1), np.asarray(p2))

        return CKKSCryptographicParameters.poly_ring_mod(full_poly, degree)


# Validação automática dos parâmetros
if __name__ == "__main__":
    try:
        print("=== CONFIGURAÇÃO PADRÃO (Básica) ===")
        params = CKKSCryptographicParameters()
        params.print_parameters_summary()
        print("\n=== CONFIGURAÇÃO COM SLOTS ===")
        CKKSCryptographicParameters.slots_config().print_parameters_summary()
        print("\n=== CONFIGURAÇÃO ALTA PRECISÃO ===")
        CKKSCryptographicParameters.high_precision_config().print_parameters_summary()
        print("\n✓ Todas as configurações são válidas!")
    except ValueError as e:
        print(f"✗ Erro na validação dos parâmetros: {e}")
