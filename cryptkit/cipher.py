"""
Password based authenticated encryption.

Each call derives a fresh AES-GCM key from the secret with scrypt and a
random salt, encrypts under a random IV, and packs everything needed for
decryption after the ciphertext::

    ciphertext || IV || auth_tag || salt

The package does not describe its own layout. ``decrypt`` must be given the
same ``algorithm``, ``salt_length`` and ``iv_length`` that ``encrypt`` used.

Basic Usage:
    >>> from cryptkit import cipher
    >>> package = cipher.encrypt("my TOP-SECRET message", "verystrong-password")
    >>> cipher.decrypt(package, "verystrong-password")
    b'my TOP-SECRET message'
"""

import logging
from typing import Any, Mapping, Union

from .config import AUTH_TAG_LENGTH, CipherOptions, ResolvedCipherOptions
from .crypto.engine import AuthenticationError, get_engine
from .crypto.utils import BinaryInput, to_bytes

logger = logging.getLogger(__name__)

OptionsLike = Union[CipherOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> ResolvedCipherOptions:
    """Apply defaults and clamping to cipher options."""
    return CipherOptions.coerce(options).resolve()


def package_length(plaintext_length: int, options: OptionsLike = None) -> int:
    """
    Size in bytes of the package ``encrypt`` produces.

    Args:
        plaintext_length: Length of the plaintext in bytes
        options: Cipher options

    Returns:
        ciphertext + IV + tag + salt length
    """
    return resolve_options(options).package_length(plaintext_length)


def encrypt(data: BinaryInput, secret: BinaryInput, options: OptionsLike = None) -> bytes:
    """
    Encrypt data.

    Args:
        data: The data to encrypt
        secret: The secret the encryption key is derived from
        options: Cipher options (algorithm, salt_length, iv_length)

    Returns:
        The packed ``ciphertext || IV || tag || salt`` bytes
    """
    resolved = resolve_options(options)
    plaintext = to_bytes(data)
    secret = to_bytes(secret)
    engine = get_engine()

    logger.debug(
        f"Encrypting {len(plaintext)} bytes with {resolved.algorithm} "
        f"(salt={resolved.salt_length}, iv={resolved.iv_length})"
    )

    salt = engine.random_bytes(resolved.salt_length)
    key = engine.derive_key(secret, salt, resolved.key_length)
    iv = engine.random_bytes(resolved.iv_length)

    ciphertext, tag = engine.aead_encrypt(key, iv, plaintext)

    return ciphertext + iv + tag + salt


def decrypt(data: BinaryInput, secret: BinaryInput, options: OptionsLike = None) -> bytes:
    """
    Decrypt data.

    The package is peeled from the tail: salt, then a tag slice and an IV
    slice that are both ``iv_length`` wide. The layout written by
    ``encrypt`` always has a 16 byte tag, so only the default
    ``iv_length`` of 16 decodes its own packages.

    Args:
        data: The package returned by ``encrypt``
        secret: The secret used while encrypting
        options: Cipher options; must equal those used while encrypting

    Returns:
        The decrypted data

    Raises:
        AuthenticationError: If the package was altered or the secret or
            options do not match the encryption call
    """
    resolved = resolve_options(options)
    package = to_bytes(data)
    secret = to_bytes(secret)
    engine = get_engine()

    salt = package[-resolved.salt_length:]
    package = package[:-resolved.salt_length]
    tag = package[-resolved.iv_length:]
    package = package[:-resolved.iv_length]
    iv = package[-resolved.iv_length:]
    ciphertext = package[:-resolved.iv_length]

    if resolved.iv_length != AUTH_TAG_LENGTH:
        logger.debug(f"Decrypting with iv_length={resolved.iv_length}; tag slice is not {AUTH_TAG_LENGTH} bytes")

    key = engine.derive_key(secret, salt, resolved.key_length)

    return engine.aead_decrypt(key, iv, ciphertext, tag)


__all__ = [
    'AuthenticationError',
    'encrypt',
    'decrypt',
    'package_length',
    'resolve_options',
]
