# ancla/core/models/public_key.py

import logging
from typing import Any, Optional

from ecdsa import VerifyingKey, MalformedPointError # type: ignore

from ancla.core.config.config_manager import ConfigManager
from ancla.core.config.crypto_config import CryptoConfig
from ancla.core.config.protocol_constants import ProtocolConstants
from ancla.core.exceptions import DecodingError
from ancla.core.services.signature_verifier_service import SignatureVerifierService

logger = logging.getLogger(__name__)

_SEC1_PREFIXES = {
    ProtocolConstants.COMPRESSED_KEY_SIZE: (0x02, 0x03),
    ProtocolConstants.UNCOMPRESSED_KEY_SIZE: (0x04,),
}

class PublicKey:
    """
    Punto público sobre la curva compartida.

    Inmutable. La identidad se define sobre la codificación comprimida
    (format(True)), nunca sobre la identidad del objeto.
    """

    __slots__ = ("_vk", "_config", "_compressed")

    def __init__(self, verifying_key: Any, config: Optional[CryptoConfig] = None) -> None:
        self._vk = verifying_key
        self._config = config or ConfigManager().crypto
        self._compressed: bytes = verifying_key.to_string("compressed")

    @classmethod
    def from_bytes(cls, encoded: bytes, config: Optional[CryptoConfig] = None) -> "PublicKey":
        """
        Decodifica un punto SEC1 comprimido (33 bytes) o sin comprimir (65 bytes).

        Raises:
            DecodingError: longitud/prefijo inválido o punto fuera de la curva.
        """
        config = config or ConfigManager().crypto

        if not isinstance(encoded, (bytes, bytearray, memoryview)):
            raise DecodingError(f"Se esperaban bytes, recibido {type(encoded).__name__}.")
        encoded = bytes(encoded)

        prefixes = _SEC1_PREFIXES.get(len(encoded))
        if prefixes is None or encoded[0] not in prefixes:
            raise DecodingError(
                f"Codificación SEC1 inválida ({len(encoded)} bytes, prefijo "
                f"{encoded[:1].hex() or 'vacío'})."
            )

        try:
            vk = VerifyingKey.from_string(encoded, curve=config.curve.curve) # type: ignore
        except (MalformedPointError, ValueError, AssertionError) as e:
            logger.warning(f"Punto rechazado en la curva {config.curve.name}: {e}")
            raise DecodingError(f"Los bytes no forman un punto válido de {config.curve.name}.") from e

        return cls(vk, config)

    @property
    def verifying_key(self) -> Any:
        return self._vk

    @property
    def config(self) -> CryptoConfig:
        return self._config

    def format(self, compress: bool) -> bytes:
        if compress:
            return self._compressed
        return self._vk.to_string("uncompressed")

    def hex(self, compress: bool = True) -> str:
        return self.format(compress).hex()

    def verify(self, payload: bytes, signature: bytes, algorithm: Optional[str] = None) -> bool:
        """
        True si 'signature' es una firma válida de 'payload' para esta clave.
        Firma incorrecta o malformada -> False. Algoritmo desconocido -> UnsupportedAlgorithmError.
        """
        return SignatureVerifierService.verify(
            self._vk, payload, signature,
            algorithm if algorithm is not None else self._config.default_algorithm,
        )

    def encrypt(self, payload: bytes) -> bytes:
        """
        Sella 'payload' para el poseedor de la clave privada correspondiente.
        Layout: ephemeral_pub (33) || nonce (12) || ciphertext || tag (16).
        """
        # Import diferido: el servicio de sellado depende de la clave privada, que depende de PublicKey.
        from ancla.core.services.seal_service import SealService
        return SealService.seal(self, payload)

    # --- Identidad ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._compressed == other._compressed

    def __hash__(self) -> int:
        return hash(self._compressed)

    def __lt__(self, other: "PublicKey") -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._compressed < other._compressed

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_compressed"):
            raise AttributeError("PublicKey es inmutable.")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"PublicKey({self._compressed.hex()})"
