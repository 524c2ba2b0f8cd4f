# ancla/core/validators/block_header_validator.py

import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from ancla.core.config.config_manager import ConfigManager
from ancla.core.config.consensus_config import ConsensusConfig
from ancla.core.models.block_header import BlockHeader
from ancla.core.models.hash_digest import HashDigest
from ancla.core.models.validation_result import HeaderViolation, ValidationResult
from ancla.core.utils.timestamp_utils import TimestampUtils

logger = logging.getLogger(__name__)

Rule = Callable[[BlockHeader, datetime], Optional[ValidationResult]]

class BlockHeaderValidator:
    """
    Validación estructural, temporal y de PoW de un header aislado.

    Función pura: no muta el header, no lee el reloj (current_time se inyecta)
    y devuelve el primer fallo en orden de evaluación.
    """

    def __init__(self, config: Optional[ConsensusConfig] = None) -> None:
        self._config = config or ConfigManager().consensus
        self._rules: List[Rule] = [
            self._check_timestamp,
            self._check_index,
            self._check_total_difficulty,
            self._check_genesis,
            self._check_non_genesis,
            self._check_pow,
        ]

    def validate(self, header: BlockHeader, current_time: datetime) -> ValidationResult:
        now = TimestampUtils.as_utc(current_time)

        for rule in self._rules:
            failure = rule(header, now)
            if failure is not None:
                logger.info(f"⛔ Header #{header.index} rechazado [{failure.violation.value}]: {failure.message}") # type: ignore
                return failure

        return ValidationResult.ok()

    # --- Reglas (en orden) ---

    def _check_timestamp(self, header: BlockHeader, now: datetime) -> Optional[ValidationResult]:
        try:
            ts = TimestampUtils.parse(header.timestamp)
        except ValueError:
            return ValidationResult.fail(
                HeaderViolation.INVALID_TIMESTAMP,
                f"El timestamp del bloque #{header.index} ({header.timestamp!r}) no respeta el formato.",
            )

        threshold = timedelta(seconds=self._config.timestamp_threshold_sec)
        if now + threshold < ts:
            return ValidationResult.fail(
                HeaderViolation.INVALID_TIMESTAMP,
                f"El timestamp del bloque #{header.index} ({header.timestamp}) es posterior "
                f"a ahora ({TimestampUtils.format(now)}, margen: {threshold}).",
            )
        return None

    def _check_index(self, header: BlockHeader, now: datetime) -> Optional[ValidationResult]:
        if header.index < 0:
            return ValidationResult.fail(
                HeaderViolation.INVALID_INDEX,
                f"El índice debe ser 0 o mayor, recibido {header.index}.",
            )
        return None

    def _check_total_difficulty(self, header: BlockHeader, now: datetime) -> Optional[ValidationResult]:
        if header.difficulty > header.total_difficulty:
            return ValidationResult.fail(
                HeaderViolation.INVALID_TOTAL_DIFFICULTY,
                f"La dificultad ({header.difficulty}) no puede superar la dificultad "
                f"total ({header.total_difficulty}).",
            )
        return None

    def _check_genesis(self, header: BlockHeader, now: datetime) -> Optional[ValidationResult]:
        if header.index != self._config.genesis_index:
            return None

        if header.difficulty != 0:
            return ValidationResult.fail(
                HeaderViolation.INVALID_DIFFICULTY,
                f"La dificultad del génesis debe ser 0, recibido {header.difficulty}.",
            )
        if header.total_difficulty != 0:
            return ValidationResult.fail(
                HeaderViolation.INVALID_TOTAL_DIFFICULTY,
                f"La dificultad total del génesis debe ser 0, recibido {header.total_difficulty}.",
            )
        if header.previous_hash:
            return ValidationResult.fail(
                HeaderViolation.INVALID_PREVIOUS_HASH,
                "El génesis no puede tener previous_hash.",
            )
        return None

    def _check_non_genesis(self, header: BlockHeader, now: datetime) -> Optional[ValidationResult]:
        if header.index <= self._config.genesis_index:
            return None

        if header.difficulty < 1:
            return ValidationResult.fail(
                HeaderViolation.INVALID_DIFFICULTY,
                f"La dificultad debe ser al menos 1 fuera del génesis, recibido {header.difficulty}.",
            )
        if not header.previous_hash:
            return ValidationResult.fail(
                HeaderViolation.INVALID_PREVIOUS_HASH,
                f"El bloque #{header.index} debe referenciar un previous_hash.",
            )
        return None

    def _check_pow(self, header: BlockHeader, now: datetime) -> Optional[ValidationResult]:
        try:
            digest = HashDigest(header.hash)
        except ValueError:
            return ValidationResult.fail(
                HeaderViolation.INVALID_NONCE,
                f"El hash del bloque #{header.index} no es un digest de "
                f"{HashDigest.SIZE} bytes ({len(header.hash)} bytes).",
            )

        if not digest.satisfies(header.difficulty):
            return ValidationResult.fail(
                HeaderViolation.INVALID_NONCE,
                f"El hash ({digest.hex()[:16]}...) con nonce {header.nonce.hex()} no cumple "
                f"la dificultad {header.difficulty}.",
            )
        return None
