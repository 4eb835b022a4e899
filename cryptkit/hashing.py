"""Message digests."""

from typing import Any

from .crypto.engine import get_engine
from .crypto.utils import BinaryInput, to_bytes

DEFAULT_ALGORITHM = "SHA-256"


def digest(data: BinaryInput, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Hash the given data.

    Args:
        data: The data to hash
        algorithm: Hash algorithm name, e.g. ``SHA-256`` or ``sha3-512``

    Returns:
        The raw digest bytes
    """
    return get_engine().digest(algorithm, to_bytes(data))


def is_valid(data: BinaryInput, expected: Any, algorithm: str = DEFAULT_ALGORITHM) -> bool:
    """
    Check that hashing ``data`` with ``algorithm`` yields ``expected``.

    A non binary ``expected`` value compares unequal.
    """
    try:
        expected = to_bytes(expected)
    except TypeError:
        return False

    engine = get_engine()
    return engine.constant_time_equal(digest(data, algorithm), expected)


__all__ = ['digest', 'is_valid', 'DEFAULT_ALGORITHM']
