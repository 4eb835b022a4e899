"""
Salted password hashing with scrypt.

``hash`` returns the random salt followed by the derived key::

    salt || derived_key

Like the cipher package, the layout is not self-describing: ``is_valid``
must be given the same ``length``, ``salt_length`` and scrypt parameters
that ``hash`` used.

Basic Usage:
    >>> from cryptkit import scrypt
    >>> stored = scrypt.hash("your-strong-password", {"length": 16})
    >>> scrypt.is_valid("your-strong-password", stored, {"length": 16})
    True
"""

import logging
from typing import Any, Mapping, Optional, Union

from .config import ResolvedScryptHashOptions, ScryptHashOptions
from .crypto.engine import KeyDerivationError, get_engine
from .crypto.utils import BinaryInput, to_bytes

logger = logging.getLogger(__name__)

OptionsLike = Union[ScryptHashOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> ResolvedScryptHashOptions:
    """Apply defaults and clamping to scrypt hash options."""
    return ScryptHashOptions.coerce(options).resolve()


def hash(key: BinaryInput, options: OptionsLike = None) -> bytes:
    """
    Hash a key using the scrypt key derivation function.

    Args:
        key: The key to hash
        options: Hash options (length, salt_length, scrypt parameters)

    Returns:
        The salt (first ``salt_length`` bytes) followed by the derived hash

    Raises:
        KeyDerivationError: If the scrypt parameters are invalid
    """
    resolved = resolve_options(options)
    key = to_bytes(key)
    engine = get_engine()

    salt = engine.random_bytes(resolved.salt_length)
    derived = engine.derive_key(key, salt, resolved.length, resolved.params)

    return salt + derived


def is_valid(key: BinaryInput, hash: Optional[BinaryInput], options: OptionsLike = None) -> bool:
    """
    Compare a key with a hash produced by ``hash``.

    Every failure, including malformed input and derivation errors, is
    reported as False.

    Args:
        key: The key to compare
        hash: The stored salt and hash bytes
        options: Hash options; must equal those used while hashing

    Returns:
        True if the key matches, False otherwise
    """
    if not hash:
        return False

    try:
        resolved = resolve_options(options)
        stored = to_bytes(hash)
        key = to_bytes(key)
    except (TypeError, ValueError):
        return False

    salt = stored[:resolved.salt_length]
    expected = stored[resolved.salt_length:]

    if len(expected) != resolved.length:
        return False

    engine = get_engine()
    try:
        candidate = engine.derive_key(key, salt, resolved.length, resolved.params)
    except KeyDerivationError as e:
        logger.debug(f"Scrypt verification aborted: {e}")
        return False

    return engine.constant_time_equal(expected, candidate)


__all__ = [
    'KeyDerivationError',
    'hash',
    'is_valid',
    'resolve_options',
]
