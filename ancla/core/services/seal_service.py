# ancla/core/services/seal_service.py

import logging
from typing import Callable, Optional

from ancla.core.config.protocol_constants import ProtocolConstants
from ancla.core.exceptions import DecodingError, DecryptionError, EncryptionError
from ancla.core.interfaces.i_private_key import IPrivateKey
from ancla.core.models.public_key import PublicKey
from ancla.infra.crypto.aes_gcm_cipher import AesGcmCipher
from ancla.infra.crypto.software_private_key import SoftwarePrivateKey

logger = logging.getLogger(__name__)

EphemeralKeyFactory = Callable[[], IPrivateKey]

class SealService:
    """
    Intercambio de claves autenticado + sellado (ECIES simplificado).

    1. Clave efímera nueva, una por mensaje.
    2. secreto = efimera.ecdh(destinatario)  -> 32 bytes = clave AES-256.
    3. AES-GCM con la clave pública efímera comprimida como associated data.

    Layout:
        [0:33]      clave pública efímera comprimida
        [33:45]     nonce
        [45:-16]    ciphertext
        [-16:]      tag
    """

    HEADER_SIZE = ProtocolConstants.COMPRESSED_KEY_SIZE

    @staticmethod
    def seal(
        recipient: PublicKey,
        payload: bytes,
        ephemeral_factory: Optional[EphemeralKeyFactory] = None,
    ) -> bytes:
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise EncryptionError(f"El payload debe ser bytes, recibido {type(payload).__name__}.")

        factory = ephemeral_factory or (lambda: SoftwarePrivateKey.generate(recipient.config))
        ephemeral = factory()
        shared_secret = ephemeral.ecdh(recipient)
        ephemeral_public = ephemeral.public_key.format(True)

        cipher = AesGcmCipher(shared_secret, recipient.config)
        sealed = cipher.encrypt(bytes(payload), ephemeral_public)

        logger.info(f"🔒 Payload de {len(payload)} bytes sellado para {recipient.hex()[:8]}...")
        return sealed

    @staticmethod
    def open(recipient_key: IPrivateKey, sealed: bytes) -> bytes:
        minimum = SealService.HEADER_SIZE + ProtocolConstants.SEAL_NONCE_SIZE + ProtocolConstants.SEAL_TAG_SIZE
        if not isinstance(sealed, (bytes, bytearray, memoryview)) or len(sealed) < minimum:
            raise DecryptionError(f"Mensaje sellado truncado o de tipo inválido (mínimo {minimum} bytes).")
        sealed = bytes(sealed)

        try:
            ephemeral_public = PublicKey.from_bytes(
                sealed[:SealService.HEADER_SIZE], recipient_key.public_key.config
            )
        except DecodingError as e:
            raise DecryptionError("La clave pública efímera del mensaje es inválida.") from e

        shared_secret = recipient_key.ecdh(ephemeral_public)
        try:
            cipher = AesGcmCipher(shared_secret, recipient_key.public_key.config)
        except EncryptionError as e:
            raise DecryptionError(str(e)) from e

        try:
            return cipher.decrypt(sealed, SealService.HEADER_SIZE)
        except DecryptionError:
            logger.warning(f"🔓 Apertura fallida para {recipient_key.public_key.hex()[:8]}...")
            raise
