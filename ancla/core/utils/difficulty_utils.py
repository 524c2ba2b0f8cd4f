# ancla/core/utils/difficulty_utils.py

from ancla.core.config.protocol_constants import ProtocolConstants

class DifficultyUtils:
    """
    Traducción entre dificultad (entero) y target numérico.

    target = 2^(8 * digest_size) // difficulty
    Un digest cumple si, leído como entero big-endian sin signo, es
    estrictamente menor que el target. Dificultad 0 se cumple siempre.
    """

    @staticmethod
    def max_target(digest_size: int = ProtocolConstants.DIGEST_SIZE) -> int:
        return 1 << (8 * digest_size)

    @staticmethod
    def difficulty_to_target(difficulty: int, digest_size: int = ProtocolConstants.DIGEST_SIZE) -> int:
        if difficulty < 0:
            raise ValueError(f"Dificultad negativa: {difficulty}")
        limit = DifficultyUtils.max_target(digest_size)
        if difficulty == 0:
            return limit
        return limit // difficulty

    @staticmethod
    def digest_to_int(digest: bytes) -> int:
        return int.from_bytes(digest, 'big', signed=False)

    @staticmethod
    def satisfies(digest: bytes, difficulty: int) -> bool:
        if difficulty < 0:
            raise ValueError(f"Dificultad negativa: {difficulty}")
        if difficulty == 0:
            return True
        if not digest:
            return False

        target = DifficultyUtils.difficulty_to_target(difficulty, len(digest))
        return DifficultyUtils.digest_to_int(digest) < target
