# ancla/infra/crypto/aes_gcm_cipher.py
import os
import logging
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ancla.core.config.config_manager import ConfigManager
from ancla.core.config.crypto_config import CryptoConfig
from ancla.core.exceptions import DecryptionError, EncryptionError

logger = logging.getLogger(__name__)

class AesGcmCipher:
    """
    AES-256-GCM con un prefijo público autenticado.

    Mensaje: non_secret || nonce (12) || ciphertext || tag (16)
    'non_secret' viaja en claro y se usa como associated data.
    """

    def __init__(self, key: bytes, config: Optional[CryptoConfig] = None) -> None:
        self._config = config or ConfigManager().crypto
        if not isinstance(key, (bytes, bytearray)) or len(key) != self._config.aead_key_size:
            size = len(key) if isinstance(key, (bytes, bytearray)) else type(key).__name__
            raise EncryptionError(
                f"La clave AEAD debe tener {self._config.aead_key_size} bytes (recibido: {size})."
            )
        self._aead = AESGCM(bytes(key))

    def encrypt(self, plaintext: bytes, non_secret: bytes = b"") -> bytes:
        nonce = os.urandom(self._config.aead_nonce_size)
        try:
            ciphertext = self._aead.encrypt(nonce, bytes(plaintext), bytes(non_secret) or None)
        except (TypeError, ValueError, OverflowError) as e:
            raise EncryptionError(f"El proveedor AEAD rechazó el payload: {e}") from e
        return bytes(non_secret) + nonce + ciphertext

    def decrypt(self, message: bytes, non_secret_length: int = 0) -> bytes:
        nonce_size = self._config.aead_nonce_size
        minimum = non_secret_length + nonce_size + self._config.aead_tag_size
        if len(message) < minimum:
            raise DecryptionError(
                f"Mensaje truncado: {len(message)} bytes, mínimo {minimum}."
            )

        non_secret = message[:non_secret_length]
        nonce = message[non_secret_length:non_secret_length + nonce_size]
        ciphertext = message[non_secret_length + nonce_size:]

        try:
            return self._aead.decrypt(nonce, ciphertext, non_secret or None)
        except InvalidTag as e:
            raise DecryptionError("Autenticación fallida: mensaje alterado o clave incorrecta.") from e
