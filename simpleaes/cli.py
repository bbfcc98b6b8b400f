"""Command line front-end: encrypt, decrypt, genkey."""

import argparse
import sys

from simpleaes.common import config
from simpleaes.common.utils import b64e
from simpleaes.crypto.aes import AES, AESKey, AES_KEY_SIZES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simpleaes", description="AES encrypt/decrypt with Base64 output")
    parser.add_argument("--key", help="Secret key (default: $AES_SECRET)")
    parser.add_argument(
        "--key-encoding",
        choices=config.KEY_ENCODINGS,
        help="How --key / $AES_SECRET is written (default: $AES_SECRET_ENCODING or utf-8)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", help="Encrypt text, print Base64 ciphertext")
    enc.add_argument("text")

    dec = sub.add_parser("decrypt", help="Decrypt Base64 ciphertext, print text")
    dec.add_argument("ciphertext")

    gen = sub.add_parser("genkey", help="Print a random Base64 key")
    gen.add_argument("--size", type=int, choices=AES_KEY_SIZES, default=16, help="Key size in bytes")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "genkey":
        print(b64e(AESKey.generate(args.size).secret))
        return 0

    try:
        cipher = AES(config.get_secret(args.key, args.key_encoding))
        if args.command == "encrypt":
            print(cipher.encrypt(args.text))
        else:
            print(cipher.decrypt(args.ciphertext))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
