# ancla/tests/unit/test_cli.py
'''
Test Suite para el lanzador de línea de comandos (main.py) y logger_config.
'''

import sys
import os
import json
import logging
from unittest.mock import patch

import pytest

current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

import main
import logger_config
from ancla.core.models.block_header import BlockHeader
from ancla.infra.crypto.software_private_key import SoftwarePrivateKey

HEADER = BlockHeader(
    index=0,
    timestamp="2024-01-01T00:00:00.000000Z",
    nonce=b"\x00",
    difficulty=0,
    total_difficulty=0,
    block_hash=b"\x10" * 32,
)

@pytest.fixture(autouse=True)
def no_log_files():
    with patch.object(main, "logger_config") as fake:
        yield fake

def test_decode_prints_json(capsys):
    code = main.main(["decode", HEADER.serialize().hex()])

    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["index"] == 0
    assert printed["hash"] == "10" * 32

def test_decode_reads_file(tmp_path, capsys):
    path = tmp_path / "header.bin"
    path.write_bytes(HEADER.serialize())

    assert main.main(["decode", f"@{path}"]) == 0
    assert json.loads(capsys.readouterr().out)["timestamp"] == HEADER.timestamp

def test_validate_reports_ok_and_violation(capsys):
    assert main.main(["validate", HEADER.serialize().hex(), "--now", "2024-01-01T00:00:10.000000Z"]) == 0
    assert capsys.readouterr().out.strip() == "OK"

    assert main.main(["validate", HEADER.serialize().hex(), "--now", "2023-12-31T23:00:00"]) == 1
    assert capsys.readouterr().out.startswith("InvalidTimestamp")

def test_verify_and_seal_commands(capsys):
    key = SoftwarePrivateKey.generate()
    payload = b"hola"
    signature = key.sign(payload)

    assert main.main(["verify", key.public_key.hex(), payload.hex(), signature.hex()]) == 0
    assert capsys.readouterr().out.strip() == "VALID"

    assert main.main(["seal", key.public_key.hex(), payload.hex()]) == 0
    sealed = bytes.fromhex(capsys.readouterr().out.strip())
    assert key.decrypt(sealed) == payload

def test_keygen_outputs_matching_pair(capsys):
    assert main.main(["keygen"]) == 0
    pair = json.loads(capsys.readouterr().out)

    key = SoftwarePrivateKey.from_hex(pair["private_key"])
    assert key.public_key.hex() == pair["public_key"]

def test_errors_return_exit_code_two(capsys):
    assert main.main(["decode", "zz"]) == 2
    assert main.main(["verify", "05" + "00" * 32, "00", "00"]) == 2
    assert "error:" in capsys.readouterr().err

def test_setup_logging_creates_numbered_files(tmp_path):
    root_logger = logging.getLogger()
    saved_handlers, saved_level = list(root_logger.handlers), root_logger.level
    try:
        first = logger_config.setup_logging(str(tmp_path))
        second = logger_config.setup_logging(str(tmp_path))
        console = [h for h in root_logger.handlers if type(h) is logging.StreamHandler]
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)

    assert first.endswith("ancla_0.log")
    assert second.endswith("ancla_1.log")
    assert os.path.isdir(tmp_path / "logs")
    assert len(console) == 1
    assert console[0].stream is sys.stdout
    assert console[0].level == logging.ERROR
