# ancla/core/services/signature_verifier_service.py

import logging
from typing import Any

# Importamos librería criptográfica (silenciando errores de tipado legacy)
from ecdsa import BadSignatureError # type: ignore
from ecdsa.der import UnexpectedDER # type: ignore
from ecdsa.util import MalformedSignature # type: ignore

from ancla.core.services.signature_algorithms import SignatureAlgorithms

logger = logging.getLogger(__name__)

class SignatureVerifierService:
    """
    Servicio de Dominio encargado de la verificación criptográfica (ECDSA).
    PublicKey.verify delega aquí.
    """

    @staticmethod
    def verify(verifying_key: Any, payload: bytes, signature: bytes, algorithm: str) -> bool:
        """
        Verifica si 'signature' fue producida sobre 'payload' por la clave privada
        correspondiente a 'verifying_key'.

        Una firma incorrecta y una firma imposible de parsear devuelven False por
        igual: el llamador no debe poder distinguirlas.

        Raises:
            UnsupportedAlgorithmError: si el nombre de algoritmo no existe.
        """
        # 1. Resolver algoritmo (esto sí es un error del llamador)
        scheme = SignatureAlgorithms.resolve(algorithm)

        # 2. Verificar Firma
        try:
            return bool(verifying_key.verify(
                bytes(signature),
                bytes(payload),
                hashfunc=scheme.hashfunc,
                sigdecode=scheme.sigdecode,
            ))

        except (BadSignatureError, UnexpectedDER, MalformedSignature):
            return False # Firma incorrecta o malformada

        except (ValueError, AssertionError):
            # Enteros fuera de rango, longitudes absurdas, etc.
            return False
