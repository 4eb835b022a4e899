"""
Cryptographic engine for cryptkit.

Adapts the primitives of the ``cryptography`` package (AES-GCM, scrypt,
hash and HMAC) to the small interface the cryptkit facades are written
against. The engine is stateless; a single module-level instance is shared
by every facade.
"""

from typing import Tuple

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt as ScryptKDF

from ..config import AUTH_TAG_LENGTH, DEFAULT_SCRYPT_PARAMS, ResolvedScryptParams, ValidationError
from .utils import constant_time_compare, generate_random_bytes

# AES-GCM accepts nonces in this range
MIN_IV_LENGTH = 8
MAX_IV_LENGTH = 128


class AuthenticationError(Exception):
    """Raised when authenticated decryption fails."""
    pass


class KeyDerivationError(Exception):
    """Raised when scrypt key derivation fails."""
    pass


class UnsupportedAlgorithmError(ValidationError):
    """Raised when a hash algorithm name is not recognised."""
    pass


_HASH_ALGORITHMS = {
    'md5': hashes.MD5,
    'sha1': hashes.SHA1,
    'sha224': hashes.SHA224,
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
    'sha512224': hashes.SHA512_224,
    'sha512256': hashes.SHA512_256,
    'sha3224': hashes.SHA3_224,
    'sha3256': hashes.SHA3_256,
    'sha3384': hashes.SHA3_384,
    'sha3512': hashes.SHA3_512,
    'sm3': hashes.SM3,
    'blake2b512': lambda: hashes.BLAKE2b(64),
    'blake2s256': lambda: hashes.BLAKE2s(32),
}


def _normalize_hash_name(name: str) -> str:
    return name.lower().replace('-', '').replace('_', '')


def resolve_hash(name: str) -> hashes.HashAlgorithm:
    """
    Resolve a hash algorithm name to a ``cryptography`` hash instance.

    Names are matched ignoring case, dashes and underscores, so
    ``SHA-256``, ``sha256`` and ``SHA_256`` are equivalent.

    Raises:
        UnsupportedAlgorithmError: If the name is unknown
    """
    if isinstance(name, str):
        factory = _HASH_ALGORITHMS.get(_normalize_hash_name(name))
        if factory is not None:
            return factory()
    raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {name!r}")


def supported_hashes() -> Tuple[str, ...]:
    """Canonical names of the supported hash algorithms."""
    return tuple(_HASH_ALGORITHMS)


def scrypt_memory_required(params: ResolvedScryptParams) -> int:
    """Bytes of working memory scrypt needs for the given parameters."""
    return 128 * params.r * (params.n + 2) + 128 * params.r * params.p


class CryptoEngine:
    """
    Thin adapter over the ``cryptography`` primitives.

    Every method is a pure function of its arguments apart from the draws
    from the operating system's random source.
    """

    tag_size = AUTH_TAG_LENGTH

    def random_bytes(self, length: int) -> bytes:
        """Return ``length`` cryptographically secure random bytes."""
        return generate_random_bytes(length)

    def derive_key(self, secret: bytes, salt: bytes, length: int,
                   params: ResolvedScryptParams = None) -> bytes:
        """
        Derive a key with scrypt.

        Args:
            secret: Key material
            salt: Salt mixed into the derivation
            length: Length of the derived key in bytes
            params: Cost parameters; scrypt defaults when omitted

        Returns:
            Derived key bytes

        Raises:
            KeyDerivationError: If the parameters are invalid, exceed the
                memory limit, or the derivation fails
        """
        if params is None:
            params = DEFAULT_SCRYPT_PARAMS.resolve()

        try:
            required = scrypt_memory_required(params)
            if required > params.maxmem:
                raise KeyDerivationError(
                    f"Scrypt parameters need {required} bytes, exceeding maxmem of {params.maxmem}"
                )

            kdf = ScryptKDF(salt=salt, length=length, n=params.n, r=params.r, p=params.p)
            return kdf.derive(secret)

        except KeyDerivationError:
            raise
        except Exception as e:
            raise KeyDerivationError(f"Key derivation failed: {str(e)}") from e

    def aead_encrypt(self, key: bytes, iv: bytes, plaintext: bytes) -> Tuple[bytes, bytes]:
        """
        Encrypt plaintext with AES-GCM.

        The AES variant follows from the key length (16, 24 or 32 bytes).

        Returns:
            Tuple of (ciphertext, authentication_tag)
        """
        aesgcm = AESGCM(key)

        # AES-GCM returns ciphertext with tag appended
        ciphertext_with_tag = aesgcm.encrypt(iv, plaintext, None)

        ciphertext = ciphertext_with_tag[:-self.tag_size]
        tag = ciphertext_with_tag[-self.tag_size:]

        return ciphertext, tag

    def aead_decrypt(self, key: bytes, iv: bytes, ciphertext: bytes, tag: bytes) -> bytes:
        """
        Decrypt ciphertext with AES-GCM.

        Raises:
            AuthenticationError: If the tag does not verify, or the IV or
                tag are malformed so that the data cannot be authenticated
        """
        if len(tag) != self.tag_size:
            raise AuthenticationError(
                f"Invalid authentication tag length: expected {self.tag_size}, got {len(tag)}"
            )
        if not MIN_IV_LENGTH <= len(iv) <= MAX_IV_LENGTH:
            raise AuthenticationError(f"Invalid IV length: {len(iv)}")

        aesgcm = AESGCM(key)

        try:
            return aesgcm.decrypt(iv, ciphertext + tag, None)
        except InvalidTag as e:
            raise AuthenticationError(
                "Authentication verification failed - data may be tampered"
            ) from e

    def digest(self, algorithm: str, data: bytes) -> bytes:
        """One-shot message digest."""
        try:
            h = hashes.Hash(resolve_hash(algorithm))
        except UnsupportedAlgorithm as e:
            raise UnsupportedAlgorithmError(f"Hash algorithm not available: {algorithm!r}") from e
        h.update(data)
        return h.finalize()

    def hmac(self, algorithm: str, key: bytes, data: bytes) -> bytes:
        """One-shot keyed message authentication code."""
        try:
            h = crypto_hmac.HMAC(key, resolve_hash(algorithm))
        except UnsupportedAlgorithm as e:
            raise UnsupportedAlgorithmError(f"HMAC algorithm not available: {algorithm!r}") from e
        h.update(data)
        return h.finalize()

    def constant_time_equal(self, a: bytes, b: bytes) -> bool:
        """Fixed-time comparison; differing lengths compare unequal."""
        return constant_time_compare(a, b)


default_engine = CryptoEngine()


def get_engine() -> CryptoEngine:
    """Return the engine shared by the cryptkit facades."""
    return default_engine

