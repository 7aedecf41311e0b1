# check.py
import argparse
import binascii
import sys

from pydantic import ValidationError

from srpconfig.common.errors import SRPError
from srpconfig.common.logging_util import setup_logger
from srpconfig.storage.params import load_params

logger = setup_logger("srpconfig")


def verify(path_params: str) -> bool:
    logger.info("Verifying %s", path_params)

    try:
        message = load_params(path_params)
        config = message.to_configuration()
        config.validate()
    except SRPError as e:
        logger.error("[X] Parameters INVALID: %s", e)
        return False
    except (OSError, ValueError, ValidationError, binascii.Error) as e:
        # unreadable file, bad JSON, missing field or bad base64
        logger.error("[X] Cannot read %s: %s", path_params, e)
        return False

    logger.info("Modulus: %d bits, generator: %d, digest: %s",
                config.N.bit_length(), config.g, message.digest)
    logger.info("[+] Parameters OK")
    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Validate an SRP parameter file")
    parser.add_argument("paths", nargs="+", help="Parameter JSON files")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    results = [verify(path) for path in args.paths]
    sys.exit(0 if all(results) else 1)
