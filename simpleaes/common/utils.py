"""Helper signatures: b64e, b64d, to_bytes."""

import base64
from typing import Union


def b64e(b: bytes) -> str:
    """Base64-encodes bytes into a string."""
    return base64.b64encode(b).decode('ascii')


def b64d(s: Union[str, bytes]) -> bytes:
    """
    Base64-decodes a string (or ASCII bytes) into bytes.
    Raises binascii.Error on characters outside the alphabet or bad padding.
    """
    return base64.b64decode(s, validate=True)


def to_bytes(value: Union[str, bytes]) -> bytes:
    """UTF-8 encodes text; bytes pass through."""
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")
