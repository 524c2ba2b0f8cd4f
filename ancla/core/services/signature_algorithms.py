# ancla/core/services/signature_algorithms.py

import hashlib
from typing import Any, Callable, Dict, NamedTuple

from ecdsa import util # type: ignore

from ancla.core.exceptions import UnsupportedAlgorithmError

class SignatureAlgorithm(NamedTuple):
    name: str
    hashfunc: Callable[..., Any]
    sigencode: Callable[..., Any]
    sigdecode: Callable[..., Any]


_REGISTRY: Dict[str, SignatureAlgorithm] = {
    algorithm.name.upper(): algorithm
    for algorithm in (
        SignatureAlgorithm("SHA1withECDSA", hashlib.sha1, util.sigencode_der, util.sigdecode_der),
        SignatureAlgorithm("SHA224withECDSA", hashlib.sha224, util.sigencode_der, util.sigdecode_der),
        SignatureAlgorithm("SHA256withECDSA", hashlib.sha256, util.sigencode_der, util.sigdecode_der),
        SignatureAlgorithm("SHA384withECDSA", hashlib.sha384, util.sigencode_der, util.sigdecode_der),
        SignatureAlgorithm("SHA512withECDSA", hashlib.sha512, util.sigencode_der, util.sigdecode_der),
        # r || s de ancho fijo en lugar de DER
        SignatureAlgorithm("SHA256withPLAIN-ECDSA", hashlib.sha256, util.sigencode_string, util.sigdecode_string),
    )
}


class SignatureAlgorithms:

    @staticmethod
    def resolve(name: str) -> SignatureAlgorithm:
        """Búsqueda sin distinguir mayúsculas. Nombre desconocido -> UnsupportedAlgorithmError."""
        if not isinstance(name, str):
            raise UnsupportedAlgorithmError(repr(name))
        try:
            return _REGISTRY[name.upper()]
        except KeyError:
            raise UnsupportedAlgorithmError(name) from None

    @staticmethod
    def names() -> list:
        return sorted(algorithm.name for algorithm in _REGISTRY.values())
