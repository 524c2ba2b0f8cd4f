# ancla/tests/unit/test_public_key.py
'''
Test Suite para PublicKey (Key Material):
    Verifica la decodificación SEC1, la re-codificación determinista y que la
    identidad dependa sólo del punto.

    Functions::
        test_generator_point_known_encoding(): Clave privada 1 -> punto generador G.
        test_compressed_round_trip(): from_bytes(format(True)) == k.
        test_uncompressed_round_trip(): from_bytes(format(False)) == k.
        test_equality_and_hash_ignore_object_identity(): Dos objetos, misma clave.
        test_rejects_bad_length_and_prefix(): DecodingError.
        test_rejects_point_off_curve(): DecodingError.
        test_public_key_is_immutable(): AttributeError al asignar.
'''

import sys
import os

import pytest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from ancla.core.exceptions import DecodingError
from ancla.core.models.public_key import PublicKey
from ancla.infra.crypto.software_private_key import SoftwarePrivateKey

GENERATOR_COMPRESSED = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
GENERATOR_UNCOMPRESSED = (
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)

def _key(seed: int = 1) -> PublicKey:
    return SoftwarePrivateKey.from_bytes(seed.to_bytes(32, "big")).public_key

def test_generator_point_known_encoding():
    print(">> Ejecutando: test_generator_point_known_encoding...")

    key = _key(1)

    assert key.format(True).hex() == GENERATOR_COMPRESSED
    assert key.format(False).hex() == GENERATOR_UNCOMPRESSED
    print("[SUCCESS] Codificación del punto generador correcta.\n")

def test_compressed_round_trip():
    for seed in (1, 2, 0xC0FFEE, 2**200 + 17):
        key = _key(seed)
        encoded = key.format(True)

        assert len(encoded) == 33
        assert encoded[0] in (0x02, 0x03)
        assert PublicKey.from_bytes(encoded) == key

def test_uncompressed_round_trip():
    for seed in (1, 3, 0xDEADBEEF):
        key = _key(seed)
        encoded = key.format(False)

        assert len(encoded) == 65
        assert encoded[0] == 0x04
        decoded = PublicKey.from_bytes(encoded)
        assert decoded == key
        assert decoded.format(True) == key.format(True)

def test_equality_and_hash_ignore_object_identity():
    a = PublicKey.from_bytes(bytes.fromhex(GENERATOR_COMPRESSED))
    b = PublicKey.from_bytes(bytes.fromhex(GENERATOR_UNCOMPRESSED))

    assert a is not b
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, _key(2)}) == 2
    assert a != _key(2)
    assert a != GENERATOR_COMPRESSED

def test_rejects_bad_length_and_prefix():
    compressed = bytes.fromhex(GENERATOR_COMPRESSED)

    invalid_inputs = [
        b"",
        b"\x00",
        compressed[:-1],                    # 32 bytes
        b"\x04" + compressed[1:],           # prefijo de no comprimida con 33 bytes
        b"\x05" + compressed[1:],
        bytes.fromhex(GENERATOR_UNCOMPRESSED)[1:],  # 64 bytes crudos, sin prefijo
    ]
    for bad in invalid_inputs:
        with pytest.raises(DecodingError):
            PublicKey.from_bytes(bad)

    with pytest.raises(DecodingError):
        PublicKey.from_bytes(GENERATOR_COMPRESSED)  # type: ignore

def test_rejects_point_off_curve():
    uncompressed = bytearray.fromhex(GENERATOR_UNCOMPRESSED)
    uncompressed[-1] ^= 0x01  # y alterada -> fuera de la curva

    with pytest.raises(DecodingError):
        PublicKey.from_bytes(bytes(uncompressed))

def test_public_key_is_immutable():
    key = _key(5)

    with pytest.raises(AttributeError):
        key._compressed = b"\x02" * 33  # type: ignore
    with pytest.raises(AttributeError):
        key.anything = 1  # type: ignore

def test_repr_shows_compressed_hex():
    assert repr(_key(1)) == f"PublicKey({GENERATOR_COMPRESSED})"

def test_keys_order_by_compressed_encoding():
    keys = [_key(seed) for seed in (9, 4, 7)]

    ordered = sorted(keys)

    assert [k.format(True) for k in ordered] == sorted(k.format(True) for k in keys)
