"""Environment configuration (.env supported) for the default secret."""

import os
from typing import Optional

from dotenv import load_dotenv

from simpleaes.common.utils import b64d

# Load environment variables from .env file
load_dotenv()

KEY_ENCODINGS = ("utf-8", "base64", "hex")


def decode_secret(secret: str, encoding: str = "utf-8") -> bytes:
    """
    Turns a textual secret into raw key bytes.
    utf-8 uses the text as is; base64 and hex decode it.
    """
    encoding = encoding.lower()
    if encoding == "utf-8":
        return secret.encode("utf-8")
    if encoding == "base64":
        return b64d(secret)
    if encoding == "hex":
        return bytes.fromhex(secret)
    raise ValueError(f"Unknown key encoding '{encoding}', expected one of {', '.join(KEY_ENCODINGS)}")


def get_secret(secret: Optional[str] = None, encoding: Optional[str] = None) -> bytes:
    """
    Returns the key bytes from an explicit value, falling back to
    AES_SECRET / AES_SECRET_ENCODING from the environment.
    """
    if secret is None:
        secret = os.getenv("AES_SECRET")
    if encoding is None:
        encoding = os.getenv("AES_SECRET_ENCODING", "utf-8")
    if not secret:
        raise ValueError("No secret given. Pass --key or set AES_SECRET.")
    return decode_secret(secret, encoding)
