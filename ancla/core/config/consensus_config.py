# ancla/core/config/consensus_config.py

import os
from typing import Dict, Any

class ConsensusConfig:
    """
    Configuración de las Reglas de Consenso que aplica el validador de headers.
    """
    # --- CONSTANTES ESTÁTICAS ---
    GENESIS_INDEX = 0
    DEFAULT_TIMESTAMP_THRESHOLD_SEC = 15

    def __init__(self):
        # Valores por defecto (Env Vars)
        self._timestamp_threshold_sec = ConsensusConfig._check_threshold(int(
            os.getenv("ANCLA_TIMESTAMP_THRESHOLD_SEC", ConsensusConfig.DEFAULT_TIMESTAMP_THRESHOLD_SEC)
        ))
        self._genesis_index = ConsensusConfig.GENESIS_INDEX

    @staticmethod
    def _check_threshold(threshold: int) -> int:
        if threshold < 0:
            raise ValueError(f"timestamp_threshold_sec no puede ser negativo: {threshold}")
        return threshold

    # --- Getters ---
    @property
    def timestamp_threshold_sec(self) -> int: return self._timestamp_threshold_sec
    @property
    def genesis_index(self) -> int: return self._genesis_index

    # --- Actualización desde JSON ---
    def update_from_dict(self, consensus_data: Dict[str, Any]) -> None:
        """
        Actualiza reglas de consenso desde un diccionario externo.
        """
        if not consensus_data:
            return

        if "timestamp_threshold_sec" in consensus_data:
            self._timestamp_threshold_sec = ConsensusConfig._check_threshold(
                int(consensus_data["timestamp_threshold_sec"])
            )
