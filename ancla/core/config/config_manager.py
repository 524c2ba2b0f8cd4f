# ancla/core/config/config_manager.py
'''
class ConfigManager:
    Centraliza el acceso a la configuración del núcleo (Consenso y Criptografía),
    cargando valores desde el entorno (.env) o desde un diccionario JSON.

    Methods:
        __new__(cls): Singleton; la primera construcción está protegida por lock.
        _initialize(self): Crea las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza las secciones desde JSON.
        reset(cls): Descarta la instancia (útil en tests tras cambiar variables de entorno).
'''

import threading
from typing import Dict, Any, Optional

from dotenv import load_dotenv

# Cargar variables de entorno si existen
load_dotenv()

# Importar piezas de configuración
from ancla.core.config.consensus_config import ConsensusConfig
from ancla.core.config.crypto_config import CryptoConfig

class ConfigManager:

    _instance: Optional["ConfigManager"] = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super(ConfigManager, cls).__new__(cls)
                    instance._initialize()
                    cls._instance = instance
        return cls._instance

    def _initialize(self):
        self._consensus = ConsensusConfig()  # Reglas del validador
        self._crypto = CryptoConfig()        # Curva y AEAD

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:
        if "consensus" in json_data:
            self._consensus.update_from_dict(json_data["consensus"])

    # --- ACCESORES ---

    @property
    def consensus(self) -> ConsensusConfig:
        return self._consensus

    @property
    def crypto(self) -> CryptoConfig:
        return self._crypto

    # --- DELEGACIÓN (Atajos) ---

    @property
    def timestamp_threshold_sec(self) -> int: return self._consensus.timestamp_threshold_sec
