#!/usr/bin/env python3
"""
bigcrypt - Command Line Entry Point

Usage:
    bigcrypt sign [--file PATH] [--params PATH] [--show-msg] [--verify]
    bigcrypt exchange [--params PATH] [--private X]

Default file locations can be set with BIGCRYPT_PARAMS_FILE and
BIGCRYPT_MESSAGE_FILE, either in the environment or in a .env file.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .common.exceptions import BigCryptError
from .config.params import (
    MESSAGE_FILE_ENV,
    default_params_path,
    exchange_params_from_mapping,
    load_signing_params,
    read_params_file,
)
from .exchange.key_exchange import exchange
from .signing import signer


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def default_message_path() -> str:
    """Message named by BIGCRYPT_MESSAGE_FILE, else the signer's own source file."""
    return os.getenv(MESSAGE_FILE_ENV) or signer.__file__


def run_sign(args: argparse.Namespace) -> int:
    """Sign a file and print the signature in hex."""
    params_path = args.params or default_params_path()
    message_path = args.file or default_message_path()

    params = load_signing_params(params_path)
    logger.debug("Loaded %d-bit signing key from %s", params.key_size, params_path)

    result = signer.sign_file(message_path, params)
    print(result.hex())

    if args.show_msg:
        print(f"\nhashed+padded msg:\n{result.padded:x}")

    if args.verify:
        verification = signer.verify_signature(result.signature, params, result.padded)
        print(f"\nverified msg:\n{verification.recovered:x}")
        print(f"matches padded msg: {verification.valid}")

    return 0


def run_exchange(args: argparse.Namespace) -> int:
    """Compute the client public value and shared secret."""
    params_path = args.params or default_params_path()

    data = read_params_file(params_path)
    if args.private is not None:
        data['x'] = args.private
    params = exchange_params_from_mapping(data, f"'{params_path}'")

    result = exchange(params)
    print(f"client public:\n{result.local_public}\n\nshared secret:\n{result.shared_secret}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigcrypt",
        description="RSA signing and Diffie-Hellman exchange on raw big-integer arithmetic"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log intermediate values to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sign = subparsers.add_parser("sign", help="Sign a file with n, d from the parameter file")
    sign.add_argument(
        "--file",
        help=f"File to sign (default: ${MESSAGE_FILE_ENV} or the signer's source)"
    )
    sign.add_argument(
        "--params", "--paramsFile",
        dest="params",
        help="JSON parameter file with n, e, d (default: $BIGCRYPT_PARAMS_FILE or params.json)"
    )
    sign.add_argument(
        "--show-msg", "--showMsg",
        dest="show_msg",
        action="store_true",
        help="Also print the hashed and padded block"
    )
    sign.add_argument(
        "--verify",
        action="store_true",
        help="Also print signature^e mod n"
    )
    sign.set_defaults(handler=run_sign)

    dh = subparsers.add_parser("exchange", help="Compute a Diffie-Hellman shared secret")
    dh.add_argument(
        "--params", "--paramsFile",
        dest="params",
        help="JSON parameter file with p, g, y_s (default: $BIGCRYPT_PARAMS_FILE or params.json)"
    )
    dh.add_argument(
        "--private",
        help="Client private scalar (default: x from the parameter file, else 123456789)"
    )
    dh.set_defaults(handler=run_exchange)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for bigcrypt."""
    load_dotenv()

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        return args.handler(args)
    except BigCryptError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
