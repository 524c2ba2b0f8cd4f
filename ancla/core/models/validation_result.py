# ancla/core/models/validation_result.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ancla.core.exceptions import InvalidBlockHeaderError


class HeaderViolation(Enum):
    INVALID_TIMESTAMP = "InvalidTimestamp"
    INVALID_INDEX = "InvalidIndex"
    INVALID_DIFFICULTY = "InvalidDifficulty"
    INVALID_TOTAL_DIFFICULTY = "InvalidTotalDifficulty"
    INVALID_PREVIOUS_HASH = "InvalidPreviousHash"
    INVALID_NONCE = "InvalidNonce"


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado etiquetado de la validación: Ok, o exactamente una violación.
    El validador lo devuelve; no se usan excepciones para el flujo de control.
    """
    violation: Optional[HeaderViolation] = None
    message: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def fail(cls, violation: HeaderViolation, message: str) -> "ValidationResult":
        return cls(violation, message)

    @property
    def is_valid(self) -> bool:
        return self.violation is None

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_if_invalid(self) -> None:
        if self.violation is not None:
            raise InvalidBlockHeaderError(self.violation, self.message)
