# ancla/core/exceptions.py
'''
Taxonomía de errores del núcleo de confianza.

    AnclaError                  Raíz común.
    DecodingError               Bytes que no forman un diccionario o un punto válido.
    MissingFieldError           Clave obligatoria del header ausente o mal tipada.
    UnsupportedAlgorithmError   Nombre de algoritmo de firma desconocido.
    EncryptionError             Fallo del AEAD al sellar.
    DecryptionError             Mensaje sellado truncado, alterado o para otra clave.
    InvalidBlockHeaderError     Forma "lanzable" de un ValidationResult fallido.

Los errores de decodificación y criptografía heredan de ValueError: el resto
del código captura ValueError como convención.
'''

from typing import Any


class AnclaError(Exception):
    pass


class DecodingError(AnclaError, ValueError):
    pass


class MissingFieldError(AnclaError, ValueError):

    def __init__(self, key: bytes, message: str) -> None:
        super().__init__(message)
        self.key = key


class UnsupportedAlgorithmError(AnclaError, ValueError):

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Algoritmo de firma no soportado: {algorithm!r}")
        self.algorithm = algorithm


class EncryptionError(AnclaError):
    pass


class DecryptionError(AnclaError, ValueError):
    pass


class InvalidBlockHeaderError(AnclaError):

    def __init__(self, kind: Any, message: str) -> None:
        super().__init__(f"[{kind.value}] {message}")
        self.kind = kind
        self.detail = message
