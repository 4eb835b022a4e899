"""
Byte handling utilities shared by the cryptkit facades.

This module normalises the binary-like inputs accepted by the public API,
renders raw bytes in the text encodings callers ask for, and wraps the
secure random source and constant-time comparison.
"""

import base64
import secrets
from typing import Union

from ..config import ValidationError


BinaryInput = Union[str, bytes, bytearray, memoryview]


class InvalidEncodingError(ValidationError):
    """Raised when a text encoding name is not supported."""
    pass


def _ucs2(data: bytes) -> str:
    # Trailing odd byte is dropped
    return data[:len(data) - len(data) % 2].decode('utf-16-le', errors='replace')


_ENCODERS = {
    'hex': lambda data: data.hex(),
    'base64': lambda data: base64.b64encode(data).decode('ascii'),
    'base64url': lambda data: base64.urlsafe_b64encode(data).decode('ascii').rstrip('='),
    'utf8': lambda data: data.decode('utf-8', errors='replace'),
    'utf-8': lambda data: data.decode('utf-8', errors='replace'),
    'latin1': lambda data: data.decode('latin-1'),
    'binary': lambda data: data.decode('latin-1'),
    'ascii': lambda data: bytes(b & 0x7F for b in data).decode('ascii'),
    'ucs2': _ucs2,
    'ucs-2': _ucs2,
    'utf16le': _ucs2,
    'utf-16le': _ucs2,
}

SUPPORTED_ENCODINGS = tuple(_ENCODERS)


def to_bytes(value: BinaryInput) -> bytes:
    """
    Normalise a binary-like input into an owned bytes object.

    Args:
        value: Text (UTF-8 encoded), bytes, bytearray or memoryview

    Returns:
        A bytes copy of the input

    Raises:
        TypeError: If the value is not binary-like
    """
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected str, bytes, bytearray or memoryview, got {type(value).__name__}")


def is_supported_encoding(encoding: str) -> bool:
    """Check whether an encoding name can be used with encode_bytes()."""
    return isinstance(encoding, str) and encoding.lower() in _ENCODERS


def encode_bytes(data: bytes, encoding: str) -> str:
    """
    Render bytes as text using the given encoding name.

    Args:
        data: Bytes to encode
        encoding: One of SUPPORTED_ENCODINGS (case-insensitive)

    Returns:
        Encoded text

    Raises:
        InvalidEncodingError: If the encoding is unknown
    """
    if not is_supported_encoding(encoding):
        raise InvalidEncodingError(f"Unknown encoding: {encoding}")
    return _ENCODERS[encoding.lower()](bytes(data))


def generate_random_bytes(length: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of random bytes to generate

    Returns:
        Cryptographically secure random bytes
    """
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise ValidationError(f"Random byte count must be a non-negative integer, got {length!r}")
    return secrets.token_bytes(length)


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte sequences in constant time.

    Sequences of different length compare unequal.
    """
    return secrets.compare_digest(a, b)
