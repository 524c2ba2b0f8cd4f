# ancla/core/models/block_header.py

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from ancla.core.config.protocol_constants import ProtocolConstants as K
from ancla.core.exceptions import DecodingError, MissingFieldError
from ancla.core.interfaces.i_dictionary_codec import IDictionaryCodec

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _default_codec() -> IDictionaryCodec:
    from ancla.infra.encoding.bencodex_codec import BencodexCodec
    return BencodexCodec()


class BlockHeader:
    """
    Encabezado de bloque: valor inmutable.

    Los campos opcionales (miner, previous_hash, tx_hash) usan b"" como "ausente".
    En el cable, "ausente" es la omisión de la clave, nunca un valor vacío; esta
    asimetría es parte del formato y se conserva tal cual.
    """

    __slots__ = (
        "_index", "_timestamp", "_nonce", "_miner", "_difficulty",
        "_total_difficulty", "_previous_hash", "_tx_hash", "_hash",
    )

    def __init__(
        self,
        index: int,
        timestamp: str,
        nonce: bytes,
        difficulty: int,
        total_difficulty: int,
        block_hash: bytes,
        miner: bytes = b"",
        previous_hash: bytes = b"",
        tx_hash: bytes = b"",
    ) -> None:
        object.__setattr__(self, "_index", int(index))
        object.__setattr__(self, "_timestamp", str(timestamp))
        object.__setattr__(self, "_nonce", bytes(nonce))
        object.__setattr__(self, "_miner", bytes(miner or b""))
        object.__setattr__(self, "_difficulty", int(difficulty))
        object.__setattr__(self, "_total_difficulty", int(total_difficulty))
        object.__setattr__(self, "_previous_hash", bytes(previous_hash or b""))
        object.__setattr__(self, "_tx_hash", bytes(tx_hash or b""))
        object.__setattr__(self, "_hash", bytes(block_hash))

    # --- Getters ---
    @property
    def index(self) -> int: return self._index
    @property
    def timestamp(self) -> str: return self._timestamp
    @property
    def nonce(self) -> bytes: return self._nonce
    @property
    def miner(self) -> bytes: return self._miner
    @property
    def difficulty(self) -> int: return self._difficulty
    @property
    def total_difficulty(self) -> int: return self._total_difficulty
    @property
    def previous_hash(self) -> bytes: return self._previous_hash
    @property
    def tx_hash(self) -> bytes: return self._tx_hash
    @property
    def hash(self) -> bytes: return self._hash

    @property
    def is_genesis(self) -> bool:
        return self._index == 0

    # --- Decodificación ---

    @classmethod
    def deserialize(cls, data: bytes, codec: Optional[IDictionaryCodec] = None) -> "BlockHeader":
        """
        bytes -> diccionario binario -> BlockHeader.

        Raises:
            DecodingError: bytes inválidos o valor raíz que no es un diccionario.
            MissingFieldError: clave obligatoria ausente o con tipo incorrecto.
        """
        value = (codec or _default_codec()).decode(data)
        if not isinstance(value, Mapping):
            raise DecodingError(f"Se esperaba un diccionario, recibido {type(value).__name__}.")

        header = cls.from_dict(value)
        logger.info(f"Header #{header.index} decodificado ({len(data)} bytes).")
        return header

    @classmethod
    def from_dict(cls, data: Mapping) -> "BlockHeader":
        return cls(
            index=_require_int(data, K.HEADER_KEY_INDEX),
            timestamp=_require(data, K.HEADER_KEY_TIMESTAMP, str, "texto"),
            difficulty=_require_int(data, K.HEADER_KEY_DIFFICULTY),
            total_difficulty=_require_int(data, K.HEADER_KEY_TOTAL_DIFFICULTY),
            nonce=_require(data, K.HEADER_KEY_NONCE, _BYTES_TYPES, "binario"),
            block_hash=_require(data, K.HEADER_KEY_HASH, _BYTES_TYPES, "binario"),
            miner=_optional_bytes(data, K.HEADER_KEY_MINER),
            previous_hash=_optional_bytes(data, K.HEADER_KEY_PREVIOUS_HASH),
            tx_hash=_optional_bytes(data, K.HEADER_KEY_TX_HASH),
        )

    # --- Codificación ---

    def to_dict(self) -> Dict[bytes, Any]:
        """Representación de diccionario binario. Opcionales sólo si no están vacíos."""
        result: Dict[bytes, Any] = {
            K.HEADER_KEY_INDEX: self._index,
            K.HEADER_KEY_TIMESTAMP: self._timestamp,
            K.HEADER_KEY_DIFFICULTY: self._difficulty,
            K.HEADER_KEY_TOTAL_DIFFICULTY: self._total_difficulty,
            K.HEADER_KEY_NONCE: self._nonce,
            K.HEADER_KEY_HASH: self._hash,
        }

        if self._miner:
            result[K.HEADER_KEY_MINER] = self._miner
        if self._previous_hash:
            result[K.HEADER_KEY_PREVIOUS_HASH] = self._previous_hash
        if self._tx_hash:
            result[K.HEADER_KEY_TX_HASH] = self._tx_hash

        return result

    def serialize(self, codec: Optional[IDictionaryCodec] = None) -> bytes:
        return (codec or _default_codec()).encode(self.to_dict())

    def to_json_dict(self) -> Dict[str, Any]:
        """Versión legible (hex) para CLI y logs."""
        return {
            "index": self._index,
            "timestamp": self._timestamp,
            "nonce": self._nonce.hex(),
            "miner": self._miner.hex() or None,
            "difficulty": self._difficulty,
            "total_difficulty": str(self._total_difficulty),
            "previous_hash": self._previous_hash.hex() or None,
            "tx_hash": self._tx_hash.hex() or None,
            "hash": self._hash.hex(),
        }

    # --- Valor ---

    def _key(self) -> Tuple[Any, ...]:
        return (
            self._index, self._timestamp, self._nonce, self._miner, self._difficulty,
            self._total_difficulty, self._previous_hash, self._tx_hash, self._hash,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockHeader):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("BlockHeader es inmutable.")

    def __repr__(self) -> str:
        return (
            f"BlockHeader(index={self._index}, timestamp={self._timestamp!r}, "
            f"difficulty={self._difficulty}, hash={self._hash.hex()[:16]}...)"
        )


# --- Lectura tipada de claves ---

def _require(data: Mapping, key: bytes, types: Any, type_name: str) -> Any:
    if key not in data:
        raise MissingFieldError(key, f"Falta la clave obligatoria {key!r} en el header.")
    value = data[key]
    if not isinstance(value, types):
        raise MissingFieldError(
            key, f"La clave {key!r} debe ser {type_name}, recibido {type(value).__name__}."
        )
    return value


def _require_int(data: Mapping, key: bytes) -> int:
    value = _require(data, key, int, "entero")
    if isinstance(value, bool):
        raise MissingFieldError(key, f"La clave {key!r} debe ser entero, recibido bool.")
    return value


def _optional_bytes(data: Mapping, key: bytes) -> bytes:
    if key not in data:
        return b""
    return _require(data, key, _BYTES_TYPES, "binario")
