# ancla/core/interfaces/i_dictionary_codec.py

from abc import ABC, abstractmethod
from typing import Any

class IDictionaryCodec(ABC):
    """
    Contrato del códec de diccionarios binarios (claves bytes -> enteros,
    bytes, texto o diccionarios anidados) con round-trip canónico.
    """

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        pass

    @abstractmethod
    def decode(self, data: bytes) -> Any:
        """
        Raises:
            DecodingError: si 'data' no es una codificación válida.
        """
        pass
