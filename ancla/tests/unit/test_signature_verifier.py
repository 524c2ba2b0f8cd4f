# ancla/tests/unit/test_signature_verifier.py
'''
Test Suite para la verificación de firmas (PublicKey.verify + SignatureVerifierService):
    Verifica solidez (firma propia válida, cualquier bit alterado invalida),
    tolerancia a firmas malformadas y el rechazo de algoritmos desconocidos.
'''

import sys
import os

import pytest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from ancla.core.exceptions import UnsupportedAlgorithmError
from ancla.core.services.signature_algorithms import SignatureAlgorithms
from ancla.infra.crypto.software_private_key import SoftwarePrivateKey

PAYLOAD = b"ancla:transfer:42"

@pytest.fixture(scope="module")
def private_key() -> SoftwarePrivateKey:
    return SoftwarePrivateKey.from_bytes(bytes.fromhex("a1" * 32))

def _flip(data: bytes, bit: int) -> bytes:
    mutated = bytearray(data)
    mutated[bit // 8] ^= 1 << (bit % 8)
    return bytes(mutated)

@pytest.mark.parametrize("algorithm", SignatureAlgorithms.names())
def test_own_signature_verifies(private_key, algorithm):
    signature = private_key.sign(PAYLOAD, algorithm)

    assert private_key.public_key.verify(PAYLOAD, signature, algorithm) is True

def test_default_algorithm_is_sha256_with_ecdsa(private_key):
    signature = private_key.sign(PAYLOAD)

    assert private_key.public_key.verify(PAYLOAD, signature) is True
    assert private_key.public_key.verify(PAYLOAD, signature, "SHA256withECDSA") is True
    # DER: SEQUENCE
    assert signature[0] == 0x30

def test_plain_encoding_is_fixed_width(private_key):
    signature = private_key.sign(PAYLOAD, "SHA256withPLAIN-ECDSA")

    assert len(signature) == 64
    # La misma firma en formato plano no es DER válido
    assert private_key.public_key.verify(PAYLOAD, signature, "SHA256withECDSA") is False

def test_algorithm_lookup_is_case_insensitive(private_key):
    signature = private_key.sign(PAYLOAD, "sha256WITHecdsa")

    assert private_key.public_key.verify(PAYLOAD, signature, "SHA256WITHECDSA") is True

def test_any_flipped_payload_bit_fails(private_key):
    signature = private_key.sign(PAYLOAD)
    public_key = private_key.public_key

    for bit in range(len(PAYLOAD) * 8):
        assert public_key.verify(_flip(PAYLOAD, bit), signature) is False

def test_any_flipped_signature_bit_fails(private_key):
    signature = private_key.sign(PAYLOAD)
    public_key = private_key.public_key

    for bit in range(len(signature) * 8):
        assert public_key.verify(PAYLOAD, _flip(signature, bit)) is False

def test_malformed_signatures_return_false(private_key):
    public_key = private_key.public_key
    malformed = [
        b"",
        b"\x00",
        b"\x30\x00",
        b"\x30\x06\x02\x01\x00\x02\x01\x00",  # r = s = 0
        b"\xff" * 72,
        private_key.sign(PAYLOAD) + b"\x00",   # basura al final
    ]
    for signature in malformed:
        assert public_key.verify(PAYLOAD, signature) is False

    assert public_key.verify(PAYLOAD, b"\x01" * 10, "SHA256withPLAIN-ECDSA") is False

def test_signature_from_other_key_fails(private_key):
    other = SoftwarePrivateKey.from_bytes(bytes.fromhex("b2" * 32))
    signature = other.sign(PAYLOAD)

    assert private_key.public_key.verify(PAYLOAD, signature) is False
    assert other.public_key.verify(PAYLOAD, signature) is True

def test_unsupported_algorithm_raises(private_key):
    signature = private_key.sign(PAYLOAD)

    with pytest.raises(UnsupportedAlgorithmError) as excinfo:
        private_key.public_key.verify(PAYLOAD, signature, "MD5withRSA")
    assert excinfo.value.algorithm == "MD5withRSA"

    with pytest.raises(UnsupportedAlgorithmError):
        private_key.sign(PAYLOAD, "SHA3withECDSA")

    # Nombre vacío: no cae al algoritmo por defecto
    with pytest.raises(UnsupportedAlgorithmError):
        private_key.public_key.verify(PAYLOAD, signature, "")
    with pytest.raises(UnsupportedAlgorithmError):
        private_key.sign(PAYLOAD, "")

def test_signing_is_deterministic(private_key):
    assert private_key.sign(PAYLOAD) == private_key.sign(PAYLOAD)
