# ancla/core/config/crypto_config.py

import os
import threading
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from ecdsa import SECP256k1 # type: ignore

from ancla.core.config.protocol_constants import ProtocolConstants


@dataclass(frozen=True)
class CurveParameters:
    """
    Parámetros de la curva compartida por todas las claves del proceso.
    Inmutable: se crea una sola vez y se pasa explícitamente a quien lo necesite.
    """
    name: str
    curve: Any

    _default: ClassVar[Optional["CurveParameters"]] = None
    _lock: ClassVar[Any] = threading.Lock()

    @classmethod
    def default(cls) -> "CurveParameters":
        """secp256k1, inicializada de forma perezosa y protegida por lock."""
        if CurveParameters._default is None:
            with CurveParameters._lock:
                if CurveParameters._default is None:
                    CurveParameters._default = cls(
                        name="secp256k1",
                        curve=SECP256k1,
                    )
        return CurveParameters._default


class CryptoConfig:
    """
    Configuración criptográfica: curva, algoritmo de firma por defecto y tamaños AEAD.
    """
    DEFAULT_ALGORITHM = "SHA256withECDSA"

    def __init__(self, curve: Optional[CurveParameters] = None):
        self._curve = curve or CurveParameters.default()
        self._default_algorithm = os.getenv("ANCLA_SIGNATURE_ALGORITHM", CryptoConfig.DEFAULT_ALGORITHM)
        self._aead_key_size = ProtocolConstants.SEAL_KEY_SIZE
        self._aead_nonce_size = ProtocolConstants.SEAL_NONCE_SIZE
        self._aead_tag_size = ProtocolConstants.SEAL_TAG_SIZE

    # --- Getters ---
    @property
    def curve(self) -> CurveParameters: return self._curve
    @property
    def default_algorithm(self) -> str: return self._default_algorithm
    @property
    def aead_key_size(self) -> int: return self._aead_key_size
    @property
    def aead_nonce_size(self) -> int: return self._aead_nonce_size
    @property
    def aead_tag_size(self) -> int: return self._aead_tag_size
