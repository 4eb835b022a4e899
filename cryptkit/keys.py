"""Random key generation."""

from .crypto.engine import get_engine
from .crypto.utils import InvalidEncodingError, encode_bytes, is_supported_encoding


def generate_key(byte_length: int = 64, encoding: str = "hex") -> str:
    """
    Generate a random key.

    Args:
        byte_length: The number of random bytes. Default: 64
        encoding: The text encoding of the result. Default: ``hex``

    Returns:
        The encoded random key

    Raises:
        InvalidEncodingError: If the encoding is not supported
    """
    if not is_supported_encoding(encoding):
        raise InvalidEncodingError(f"Unknown encoding: {encoding}")

    return encode_bytes(get_engine().random_bytes(byte_length), encoding)


__all__ = ['generate_key', 'InvalidEncodingError']
