# ancla/core/config/protocol_constants.py

from typing import Final

class ProtocolConstants:
    """
    Vocabulario inmutable del protocolo.
    Centraliza:
    1. Claves binarias del header (formato de cable, no se tocan).
    2. Formato de timestamp.
    3. Layout del mensaje sellado (ECDH + AES-GCM).
    """

    # ==========================================================================
    # 1. CLAVES DEL HEADER (un byte ASCII cada una)
    # ==========================================================================
    # Cambiar cualquiera rompe la compatibilidad de hash con cadenas existentes.
    HEADER_KEY_INDEX: Final[bytes]            = b"i"
    HEADER_KEY_TIMESTAMP: Final[bytes]        = b"t"
    HEADER_KEY_DIFFICULTY: Final[bytes]       = b"d"
    HEADER_KEY_TOTAL_DIFFICULTY: Final[bytes] = b"T"
    HEADER_KEY_NONCE: Final[bytes]            = b"n"
    HEADER_KEY_MINER: Final[bytes]            = b"m"
    HEADER_KEY_PREVIOUS_HASH: Final[bytes]    = b"p"
    HEADER_KEY_TX_HASH: Final[bytes]          = b"x"
    HEADER_KEY_HASH: Final[bytes]             = b"h"

    # ==========================================================================
    # 2. TIMESTAMP
    # ==========================================================================
    # yyyy-MM-ddTHH:mm:ss.ffffffZ (UTC, microsegundos, 'Z' literal)
    TIMESTAMP_FORMAT: Final[str]  = "%Y-%m-%dT%H:%M:%S.%fZ"
    TIMESTAMP_PATTERN: Final[str] = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z"

    # ==========================================================================
    # 3. SELLO (Authenticated Key Exchange + AEAD)
    # ==========================================================================
    # ephemeral_pub (33) || nonce (12) || ciphertext || tag (16)
    COMPRESSED_KEY_SIZE: Final[int]   = 33
    UNCOMPRESSED_KEY_SIZE: Final[int] = 65
    SEAL_NONCE_SIZE: Final[int]       = 12
    SEAL_TAG_SIZE: Final[int]         = 16
    SEAL_KEY_SIZE: Final[int]         = 32

    # ==========================================================================
    # 4. DIGEST
    # ==========================================================================
    DIGEST_SIZE: Final[int] = 32  # SHA-256
