# ancla/core/utils/crypto_utility.py

import hashlib
from typing import Union

class CryptoUtility:
    @staticmethod
    def sha256(data: Union[str, bytes]) -> bytes:
        """Retorna el digest SHA-256 crudo (32 bytes)."""
        return hashlib.sha256(CryptoUtility._to_bytes(data)).digest()

    @staticmethod
    def _to_bytes(data: Union[str, bytes]) -> bytes:
        """Normaliza entrada a bytes de forma segura."""
        if isinstance(data, str):
            return data.encode('utf-8')
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise TypeError(f"Tipo no soportado para hashing: {type(data)}")
