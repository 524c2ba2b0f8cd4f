# ancla/core/models/hash_digest.py

from ancla.core.config.protocol_constants import ProtocolConstants
from ancla.core.utils.difficulty_utils import DifficultyUtils

class HashDigest:
    """Digest SHA-256 de tamaño fijo (32 bytes)."""

    __slots__ = ("_digest",)

    SIZE = ProtocolConstants.DIGEST_SIZE

    def __init__(self, digest: bytes) -> None:
        digest = bytes(digest)
        if len(digest) != HashDigest.SIZE:
            raise ValueError(
                f"Un HashDigest debe tener {HashDigest.SIZE} bytes, recibidos {len(digest)}."
            )
        self._digest = digest

    @classmethod
    def from_hex(cls, hex_digest: str) -> "HashDigest":
        return cls(bytes.fromhex(hex_digest))

    @property
    def digest(self) -> bytes: return self._digest

    def hex(self) -> str:
        return self._digest.hex()

    def satisfies(self, difficulty: int) -> bool:
        """Comparación numérica contra 2^256 // difficulty (ver DifficultyUtils)."""
        return DifficultyUtils.satisfies(self._digest, difficulty)

    def __bytes__(self) -> bytes:
        return self._digest

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashDigest):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __repr__(self) -> str:
        return f"HashDigest({self.hex()})"
