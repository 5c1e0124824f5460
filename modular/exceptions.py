"""
Exceções da aritmética modular.
"""


class ModulusMismatchError(ValueError):
    """Operação entre elementos de módulos diferentes."""

    def __init__(self, left_modulus: int, right_modulus: int):
        self.left_modulus = left_modulus
        self.right_modulus = right_modulus
        super().__init__(
            f"Módulos incompatíveis: {left_modulus} e {right_modulus}"
        )


class NoInverseError(ZeroDivisionError):
    """Elemento sem inverso multiplicativo."""

    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value} não possui inverso módulo {modulus}")
