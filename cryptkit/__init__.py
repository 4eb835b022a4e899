"""
cryptkit - cryptographic utility primitives.

Small, stateless helpers composed over the ``cryptography`` package.

Key Features:
- Password based AES-GCM encryption with salt, IV and tag packed alongside the ciphertext
- Salted scrypt password hashing with safe, boolean-only verification
- Message digests and HMACs with constant-time verification
- Random key generation in common text encodings

Basic Usage:
    >>> from cryptkit import cipher, scrypt, generate_key
    >>>
    >>> package = cipher.encrypt(b"Hello, Bob!", "verystrong-password")
    >>> cipher.decrypt(package, "verystrong-password")
    b'Hello, Bob!'
    >>>
    >>> stored = scrypt.hash("password")
    >>> scrypt.is_valid("password", stored)
    True
    >>>
    >>> len(generate_key())
    128
"""

__version__ = "1.0.0"
__author__ = "cryptkit contributors"

from . import cipher, hashing, mac, scrypt
from .config import (
    CipherOptions,
    ScryptHashOptions,
    ScryptParams,
    ValidationError,
)
from .crypto.engine import AuthenticationError, KeyDerivationError, UnsupportedAlgorithmError
from .crypto.utils import InvalidEncodingError
from .keys import generate_key
from .mac import EncodingMismatchError, EncodingRequiredError

__all__ = [
    # Version info
    '__version__',

    # Facades
    'cipher',
    'scrypt',
    'hashing',
    'mac',
    'generate_key',

    # Configuration
    'CipherOptions',
    'ScryptHashOptions',
    'ScryptParams',

    # Errors
    'ValidationError',
    'AuthenticationError',
    'KeyDerivationError',
    'UnsupportedAlgorithmError',
    'InvalidEncodingError',
    'EncodingRequiredError',
    'EncodingMismatchError',
]
