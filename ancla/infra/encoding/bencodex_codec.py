# ancla/infra/encoding/bencodex_codec.py
import logging
from typing import Any

import bencodex

from ancla.core.exceptions import DecodingError
from ancla.core.interfaces.i_dictionary_codec import IDictionaryCodec

logger = logging.getLogger(__name__)

class BencodexCodec(IDictionaryCodec):
    """
    Adaptador sobre la librería 'bencodex'.
    bytes -> Binary, str -> Text, int -> Integer, dict -> Dictionary (claves ordenadas).
    """

    def encode(self, value: Any) -> bytes:
        return bencodex.dumps(value)

    def decode(self, data: bytes) -> Any:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DecodingError(f"Se esperaban bytes, recibido {type(data).__name__}.")
        try:
            return bencodex.loads(bytes(data))
        except Exception as e:
            logger.warning(f"Bencodex inválido ({len(data)} bytes): {e}")
            raise DecodingError(f"Bytes Bencodex inválidos: {e}") from e
