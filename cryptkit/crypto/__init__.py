"""
Cryptographic primitives for cryptkit.

This module provides the engine the facades are built on:
- Key derivation (scrypt)
- Authenticated encryption (AES-GCM)
- Message digests and HMAC
- Binary input normalisation and text encodings
"""

from .engine import (
    CryptoEngine,
    AuthenticationError,
    KeyDerivationError,
    UnsupportedAlgorithmError,
    get_engine,
    resolve_hash,
    supported_hashes,
)
from .utils import (
    BinaryInput,
    InvalidEncodingError,
    SUPPORTED_ENCODINGS,
    constant_time_compare,
    encode_bytes,
    generate_random_bytes,
    to_bytes,
)

__all__ = [
    'CryptoEngine',
    'AuthenticationError',
    'KeyDerivationError',
    'UnsupportedAlgorithmError',
    'get_engine',
    'resolve_hash',
    'supported_hashes',
    'BinaryInput',
    'InvalidEncodingError',
    'SUPPORTED_ENCODINGS',
    'constant_time_compare',
    'encode_bytes',
    'generate_random_bytes',
    'to_bytes',
]
