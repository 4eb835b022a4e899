"""
Hash-based message authentication codes.

Digests are returned as raw bytes, or as text when an ``encoding`` is
given. A text digest can only be verified when the same encoding is
supplied again.
"""

from typing import Optional, Union

from .config import ValidationError
from .crypto.engine import get_engine
from .crypto.utils import BinaryInput, encode_bytes, to_bytes

DEFAULT_ALGORITHM = "SHA-256"


class EncodingRequiredError(ValidationError):
    """Raised when a text HMAC is verified without its encoding."""

    def __init__(self, message: str = "You must specify the encoding used during the HMAC generation."):
        super().__init__(message)


class EncodingMismatchError(ValidationError):
    """Raised when a raw HMAC is verified with an encoding."""

    def __init__(self, message: str = "The compared HMAC is not of type bytes. Please, omit the 'encoding' parameter."):
        super().__init__(message)


def digest(message: BinaryInput, secret: BinaryInput, algorithm: str = DEFAULT_ALGORITHM,
           encoding: Optional[str] = None) -> Union[bytes, str]:
    """
    Generate a hash-based message authentication code.

    Args:
        message: The protected message
        secret: The secret key
        algorithm: Hash algorithm name. Default: ``SHA-256``
        encoding: Optional text encoding for the result, e.g. ``hex``

    Returns:
        The HMAC as bytes, or as text when ``encoding`` is given
    """
    mac = get_engine().hmac(algorithm or DEFAULT_ALGORITHM, to_bytes(secret), to_bytes(message))
    if encoding:
        return encode_bytes(mac, encoding)
    return mac


def is_valid(expected: Union[BinaryInput, str], message: BinaryInput, secret: BinaryInput,
             algorithm: Optional[str] = None, encoding: Optional[str] = None) -> bool:
    """
    Compare an HMAC with the one computed for ``message``.

    Args:
        expected: The HMAC to check, as bytes or encoded text
        message: The protected message
        secret: The secret key
        algorithm: Hash algorithm name. Default: ``SHA-256``
        encoding: The encoding used when a text HMAC was generated

    Returns:
        True if the HMAC is valid, False otherwise

    Raises:
        EncodingRequiredError: If ``expected`` is text and no encoding is given
        EncodingMismatchError: If ``expected`` is bytes and an encoding is given
    """
    if isinstance(expected, str):
        if not encoding:
            raise EncodingRequiredError()
        target = digest(message, secret, algorithm, encoding)
        return get_engine().constant_time_equal(expected.encode('utf-8'), target.encode('utf-8'))

    if encoding:
        raise EncodingMismatchError()

    target = digest(message, secret, algorithm)
    return get_engine().constant_time_equal(to_bytes(expected), target)


__all__ = [
    'EncodingRequiredError',
    'EncodingMismatchError',
    'digest',
    'is_valid',
    'DEFAULT_ALGORITHM',
]
