import sys
import json
import argparse
import logging
from datetime import datetime, timezone
from typing import List, Optional

import logger_config

from ancla.core.exceptions import AnclaError
from ancla.core.models.block_header import BlockHeader
from ancla.core.models.public_key import PublicKey
from ancla.core.utils.timestamp_utils import TimestampUtils
from ancla.core.validators.block_header_validator import BlockHeaderValidator
from ancla.infra.crypto.software_private_key import SoftwarePrivateKey

logger = logging.getLogger(__name__)

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def read_hex_argument(value: str) -> bytes:
    """Acepta hex directo o '@ruta' (archivo binario crudo, o hex si es texto)."""
    if value.startswith("@"):
        with open(value[1:], "rb") as f:
            raw = f.read()
        try:
            return bytes.fromhex(raw.decode("ascii").strip())
        except (UnicodeDecodeError, ValueError):
            return raw
    return bytes.fromhex(value.strip())

def parse_now(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    try:
        return TimestampUtils.parse(value)
    except ValueError:
        return TimestampUtils.as_utc(datetime.fromisoformat(value))

# =========================================================
# 📦 COMANDOS
# =========================================================

def cmd_decode(args: argparse.Namespace) -> int:
    header = BlockHeader.deserialize(read_hex_argument(args.header))
    print(json.dumps(header.to_json_dict(), indent=2))
    return 0

def cmd_validate(args: argparse.Namespace) -> int:
    header = BlockHeader.deserialize(read_hex_argument(args.header))
    result = BlockHeaderValidator().validate(header, parse_now(args.now))
    if result.is_valid:
        print("OK")
        return 0
    print(f"{result.violation.value}: {result.message}") # type: ignore
    return 1

def cmd_verify(args: argparse.Namespace) -> int:
    public_key = PublicKey.from_bytes(bytes.fromhex(args.public_key))
    valid = public_key.verify(
        read_hex_argument(args.payload), bytes.fromhex(args.signature), args.algorithm
    )
    print("VALID" if valid else "INVALID")
    return 0 if valid else 1

def cmd_seal(args: argparse.Namespace) -> int:
    public_key = PublicKey.from_bytes(bytes.fromhex(args.public_key))
    print(public_key.encrypt(read_hex_argument(args.payload)).hex())
    return 0

def cmd_keygen(args: argparse.Namespace) -> int:
    private_key = SoftwarePrivateKey.generate()
    print(json.dumps({
        "private_key": private_key.to_bytes().hex(),
        "public_key": private_key.public_key.hex(),
    }, indent=2))
    return 0

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ancla", description="Núcleo de confianza Ancla: headers y claves")
    parser.add_argument("--data-dir", help="Directorio base para logs (por defecto ANCLA_DATA_DIR)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("decode", help="Decodifica un header y lo imprime como JSON")
    p.add_argument("header", help="Header serializado en hex, o @archivo")
    p.set_defaults(handler=cmd_decode)

    p = subparsers.add_parser("validate", help="Valida un header contra la hora actual")
    p.add_argument("header", help="Header serializado en hex, o @archivo")
    p.add_argument("--now", help="Hora de referencia (ISO 8601); por defecto el reloj del sistema")
    p.set_defaults(handler=cmd_validate)

    p = subparsers.add_parser("verify", help="Verifica una firma ECDSA")
    p.add_argument("public_key", help="Clave pública SEC1 en hex")
    p.add_argument("payload", help="Payload en hex, o @archivo")
    p.add_argument("signature", help="Firma en hex")
    p.add_argument("--algorithm", default=None, help="Por defecto SHA256withECDSA")
    p.set_defaults(handler=cmd_verify)

    p = subparsers.add_parser("seal", help="Cifra un payload para una clave pública")
    p.add_argument("public_key", help="Clave pública SEC1 en hex")
    p.add_argument("payload", help="Payload en hex, o @archivo")
    p.set_defaults(handler=cmd_seal)

    p = subparsers.add_parser("keygen", help="Genera un par de claves nuevo")
    p.set_defaults(handler=cmd_keygen)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger_config.setup_logging(args.data_dir)

    try:
        return args.handler(args)
    except (AnclaError, ValueError, OSError) as e:
        logger.error(f"❌ Comando '{args.command}' fallido: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
