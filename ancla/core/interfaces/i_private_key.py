# ancla/core/interfaces/i_private_key.py

from abc import ABC, abstractmethod
from typing import Optional

from ancla.core.models.public_key import PublicKey

class IPrivateKey(ABC):
    """
    [Abstracción de Seguridad]
    Contrato mínimo que el núcleo consume de una clave privada.

    Permite desacoplar el sellado (ECDH + AEAD) y las pruebas de firma
    del almacenamiento y la representación interna del escalar.
    """

    @property
    @abstractmethod
    def public_key(self) -> PublicKey:
        """Identidad pública asociada."""
        pass

    @abstractmethod
    def ecdh(self, peer_public_key: PublicKey) -> bytes:
        """
        Deriva el secreto compartido con 'peer_public_key'.

        Returns:
            bytes: 32 bytes, SHA-256 del punto compartido comprimido.
        """
        pass

    @abstractmethod
    def sign(self, payload: bytes, algorithm: Optional[str] = None) -> bytes:
        """
        Firma 'payload' con el algoritmo indicado (por defecto el de CryptoConfig).
        """
        pass
