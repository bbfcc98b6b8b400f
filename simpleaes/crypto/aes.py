"""AES(ECB)+PKCS#7 helpers and the AES wrapper class (use library)."""

import os
import sys
from typing import Literal, Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.backends import default_backend
from pydantic import BaseModel, ConfigDict, Field, field_validator

from simpleaes.common.utils import b64e, b64d, to_bytes

# AES accepts 128, 192 and 256-bit keys
AES_KEY_SIZES = (16, 24, 32)
# AES block size is 128 bits (16 bytes)
AES_BLOCK_SIZE_BITS = 128


def _cipher(key: bytes) -> Cipher:
    # A bare "AES" transformation: ECB, no IV
    return Cipher(
        algorithms.AES(key),
        modes.ECB(),
        backend=default_backend()
    )


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypts plaintext using AES in ECB mode with PKCS#7 padding.

    key: 16, 24 or 32-byte AES key
    plaintext: The data to encrypt
    Returns: The encrypted ciphertext
    """
    padder = padding.PKCS7(AES_BLOCK_SIZE_BITS).padder()
    padded_data = padder.update(plaintext) + padder.finalize()

    encryptor = _cipher(key).encryptor()
    return encryptor.update(padded_data) + encryptor.finalize()


def decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypts ciphertext using AES in ECB mode with PKCS#7 padding.

    key: 16, 24 or 32-byte AES key
    ciphertext: The data to decrypt
    Returns: The original plaintext
    """
    decryptor = _cipher(key).decryptor()
    # Raises ValueError when the input is not a whole number of blocks
    padded_plaintext = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(AES_BLOCK_SIZE_BITS).unpadder()
    try:
        return unpadder.update(padded_plaintext) + unpadder.finalize()
    except ValueError:
        # Wrong key or corrupt data
        print("Error: Failed to unpad data. Key may be incorrect or data corrupted.", file=sys.stderr)
        raise


class AESKey(BaseModel):
    """
    Secret key material for AES.
    Immutable once built; the secret never shows up in repr().
    """
    model_config = ConfigDict(frozen=True)

    algorithm: Literal["AES"] = "AES"
    secret: bytes = Field(repr=False)

    @field_validator("secret")
    @classmethod
    def _check_length(cls, v: bytes) -> bytes:
        if len(v) not in AES_KEY_SIZES:
            raise ValueError(f"AES key must be 16, 24 or 32 bytes, got {len(v)}")
        return v

    @classmethod
    def from_bytes(cls, secret: bytes) -> "AESKey":
        return cls(secret=bytes(secret))

    @classmethod
    def from_string(cls, secret: str) -> "AESKey":
        """Uses the UTF-8 encoding of the string as the key."""
        return cls(secret=secret.encode("utf-8"))

    @classmethod
    def generate(cls, size: int = 16) -> "AESKey":
        """Returns a new random key of `size` bytes."""
        return cls(secret=os.urandom(size))


class AES:
    """
    Advanced Encryption Standard wrapper.

    Holds one key and turns text into Base64 ciphertext and back. A new
    cipher context is created on every call, so a single instance can be
    shared between threads.

    Note: the transformation is ECB with PKCS#7 padding, so equal plaintexts
    under the same key give equal ciphertexts.
    """

    def __init__(self, key: Union[AESKey, bytes, str]):
        if isinstance(key, AESKey):
            self._key = key
        elif isinstance(key, (bytes, bytearray)):
            self._key = AESKey.from_bytes(key)
        elif isinstance(key, str):
            self._key = AESKey.from_string(key)
        else:
            raise TypeError(f"Unsupported key type: {type(key).__name__}")

    @property
    def key(self) -> AESKey:
        return self._key

    def encrypt(self, value: Union[str, bytes]) -> str:
        """
        Encrypts a string (UTF-8) or raw bytes.
        Returns: Base64 text of the ciphertext
        """
        return b64e(encrypt(self._key.secret, to_bytes(value)))

    def decrypt(self, value: Union[str, bytes]) -> str:
        """
        Decrypts Base64 text (or Base64 bytes) made with the same key.
        Returns: The plaintext as a UTF-8 string

        Raises ValueError (binascii.Error, UnicodeDecodeError included) on
        malformed input or a key mismatch.
        """
        plaintext = decrypt(self._key.secret, b64d(value))
        return plaintext.decode("utf-8")

    def __repr__(self):
        return f"AES(key={self._key!r})"
