# ancla/infra/crypto/software_private_key.py
import logging
from typing import Any, Optional

from ecdsa import SigningKey # type: ignore

# Importación del contrato
from ancla.core.interfaces.i_private_key import IPrivateKey
from ancla.core.config.config_manager import ConfigManager
from ancla.core.config.crypto_config import CryptoConfig
from ancla.core.models.public_key import PublicKey
from ancla.core.services.signature_algorithms import SignatureAlgorithms
from ancla.core.utils.crypto_utility import CryptoUtility

logger = logging.getLogger(__name__)

class SoftwarePrivateKey(IPrivateKey):
    """
    Clave privada secp256k1 en memoria (librería ecdsa).
    El escalar nunca se registra en logs ni aparece en repr().
    """

    def __init__(self, signing_key: Any, config: Optional[CryptoConfig] = None) -> None:
        self._sk: Any = signing_key
        self._config = config or ConfigManager().crypto
        self._public_key = PublicKey(self._sk.verifying_key, self._config)

    @classmethod
    def generate(cls, config: Optional[CryptoConfig] = None) -> "SoftwarePrivateKey":
        """Clave nueva desde el CSPRNG del sistema operativo (os.urandom)."""
        config = config or ConfigManager().crypto
        sk = SigningKey.generate(curve=config.curve.curve) # type: ignore
        return cls(sk, config)

    @classmethod
    def from_bytes(cls, raw: bytes, config: Optional[CryptoConfig] = None) -> "SoftwarePrivateKey":
        config = config or ConfigManager().crypto
        try:
            sk = SigningKey.from_string(bytes(raw), curve=config.curve.curve) # type: ignore
        except Exception:
            logger.exception("Fallo al cargar la clave privada")
            raise ValueError("Formato de clave privada inválido.")
        return cls(sk, config)

    @classmethod
    def from_hex(cls, private_key_hex: str, config: Optional[CryptoConfig] = None) -> "SoftwarePrivateKey":
        try:
            raw = bytes.fromhex(private_key_hex)
        except (ValueError, TypeError):
            raise ValueError("Formato de clave privada inválido.")
        return cls.from_bytes(raw, config)

    def to_bytes(self) -> bytes:
        return self._sk.to_string()

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    def ecdh(self, peer_public_key: PublicKey) -> bytes:
        # Punto compartido = d * Q
        shared_point = peer_public_key.verifying_key.pubkey.point * self._sk.privkey.secret_multiplier
        x = shared_point.x()
        y = shared_point.y()

        # SHA-256(paridad || x), con x sin ceros a la izquierda
        parity = b"\x03" if y & 1 else b"\x02"
        x_bytes = x.to_bytes((x.bit_length() + 7) // 8, "big")
        return CryptoUtility.sha256(parity + x_bytes)

    def sign(self, payload: bytes, algorithm: Optional[str] = None) -> bytes:
        if algorithm is None:
            algorithm = self._config.default_algorithm
        scheme = SignatureAlgorithms.resolve(algorithm)

        # RFC 6979: firma determinista, no consume aleatoriedad
        signature: bytes = self._sk.sign_deterministic(
            bytes(payload),
            hashfunc=scheme.hashfunc,
            sigencode=scheme.sigencode,
        )
        logger.debug(f"Firma {scheme.name} generada por {self._public_key.hex()[:8]}...")
        return signature

    def decrypt(self, sealed: bytes) -> bytes:
        """Abre un mensaje producido por PublicKey.encrypt para esta clave."""
        from ancla.core.services.seal_service import SealService
        return SealService.open(self, sealed)

    def __repr__(self) -> str:
        return f"SoftwarePrivateKey(public_key={self._public_key.hex()})"
