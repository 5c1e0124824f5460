# Pacote CKKS

from .basis import RootBasis
from .constants import CKKSCryptographicParameters
from .encoder import CKKSEncoder, create_ckks_encoder
from .plaintext import CKKSPlaintext

__all__ = [
    "CKKSEncoder",
    "CKKSPlaintext",
    "CKKSCryptographicParameters",
    "RootBasis",
    "create_ckks_encoder",
]
