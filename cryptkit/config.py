"""
Configuration values for cryptkit operations.

Every public operation resolves its options once, at the top of the call,
into one of the frozen value objects below. Caller supplied options are
never mutated.

Options may be given either as the dataclasses defined here or as plain
mappings. Mapping keys use the snake_case field names; the camelCase names
of the original JavaScript API (``saltLength``, ``ivLength``, ``salt``,
``iv``, ``blockSize``) are accepted as aliases.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Optional, Union


class ValidationError(ValueError):
    """Raised when an operation is configured with malformed values."""
    pass


@dataclass(frozen=True)
class Bounds:
    """Inclusive range with a default for a length option."""
    minimum: int
    maximum: int
    default: int

    def resolve(self, value: Optional[int], name: str = "value") -> int:
        """
        Apply the default to a missing value and clamp it into range.

        Zero counts as missing, matching the original `||=` semantics.
        """
        if value is None or value == 0:
            return self.default
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(f"{name} must be an integer, got {value!r}")
        return min(max(value, self.minimum), self.maximum)


# Cipher package layout
CIPHER_SALT_LENGTH = Bounds(minimum=16, maximum=64, default=32)
CIPHER_IV_LENGTH = Bounds(minimum=16, maximum=32, default=16)
AUTH_TAG_LENGTH = 16

DEFAULT_CIPHER_ALGORITHM = "aes-256-gcm"
CIPHER_KEY_LENGTHS = {
    "aes-128-gcm": 16,
    "aes-192-gcm": 24,
    "aes-256-gcm": 32,
}

# Scrypt package layout
SCRYPT_SALT_LENGTH = Bounds(minimum=16, maximum=64, default=32)
SCRYPT_HASH_LENGTH = Bounds(minimum=16, maximum=256, default=64)

MiB = 1024 * 1024


def _from_mapping(cls, values: Mapping[str, Any], aliases: Mapping[str, str]):
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in values.items():
        name = aliases.get(key, key)
        if name not in known:
            raise ValidationError(f"Unknown {cls.__name__} option: {key}")
        kwargs[name] = value
    return cls(**kwargs)


@dataclass(frozen=True)
class ResolvedScryptParams:
    """Effective scrypt parameters handed to the engine."""
    n: int
    r: int
    p: int
    maxmem: int


@dataclass(frozen=True)
class ScryptParams:
    """
    Scrypt cost parameters.

    ``N``, ``r`` and ``p`` are aliases for ``cost``, ``block_size`` and
    ``parallelization``; when both spellings are given the alias wins.

    Suggested bundles are available through :meth:`preset`:

    ==========  ======  ==========  ===============  ======
    Preset      cost    block_size  parallelization  maxmem
    ==========  ======  ==========  ===============  ======
    standard    16384   8           1                32 MiB
    high        65536   16          1                130 MiB
    limited     8192    4           1                16 MiB
    ==========  ======  ==========  ===============  ======
    """
    cost: int = 16384
    block_size: int = 8
    parallelization: int = 1
    maxmem: int = 32 * MiB
    N: Optional[int] = None
    r: Optional[int] = None
    p: Optional[int] = None

    def resolve(self) -> ResolvedScryptParams:
        return ResolvedScryptParams(
            n=self.N if self.N is not None else self.cost,
            r=self.r if self.r is not None else self.block_size,
            p=self.p if self.p is not None else self.parallelization,
            maxmem=self.maxmem,
        )

    @classmethod
    def preset(cls, name: str) -> "ScryptParams":
        """Return one of the named parameter bundles."""
        try:
            return SCRYPT_PRESETS[name.lower()]
        except (KeyError, AttributeError):
            raise ValidationError(
                f"Unknown scrypt preset: {name!r}. Expected one of {sorted(SCRYPT_PRESETS)}"
            ) from None

    @classmethod
    def coerce(cls, value: Union["ScryptParams", Mapping[str, Any], None]) -> "ScryptParams":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return _from_mapping(cls, value, {"blockSize": "block_size"})
        raise ValidationError(f"Invalid scrypt options: {value!r}")


SCRYPT_PRESETS = {
    "standard": ScryptParams(),
    "high": ScryptParams(cost=65536, block_size=16, parallelization=1, maxmem=130 * MiB),
    "limited": ScryptParams(cost=8192, block_size=4, parallelization=1, maxmem=16 * MiB),
}

# Parameters used for the key derivation internal to the cipher
DEFAULT_SCRYPT_PARAMS = SCRYPT_PRESETS["standard"]


@dataclass(frozen=True)
class ResolvedCipherOptions:
    """Cipher options after defaults and clamping."""
    algorithm: str
    key_length: int
    salt_length: int
    iv_length: int

    def package_length(self, plaintext_length: int) -> int:
        """Size of the package produced for a plaintext of the given length."""
        return plaintext_length + self.iv_length + AUTH_TAG_LENGTH + self.salt_length


@dataclass(frozen=True)
class CipherOptions:
    """Options for cryptkit.cipher. Must match between encrypt and decrypt."""
    algorithm: Optional[str] = DEFAULT_CIPHER_ALGORITHM
    salt_length: Optional[int] = None
    iv_length: Optional[int] = None

    def resolve(self) -> ResolvedCipherOptions:
        algorithm = self.algorithm
        if not isinstance(algorithm, str) or algorithm.lower() not in CIPHER_KEY_LENGTHS:
            algorithm = DEFAULT_CIPHER_ALGORITHM
        algorithm = algorithm.lower()

        return ResolvedCipherOptions(
            algorithm=algorithm,
            key_length=CIPHER_KEY_LENGTHS[algorithm],
            salt_length=CIPHER_SALT_LENGTH.resolve(self.salt_length, "salt_length"),
            iv_length=CIPHER_IV_LENGTH.resolve(self.iv_length, "iv_length"),
        )

    @classmethod
    def coerce(cls, value: Union["CipherOptions", Mapping[str, Any], None]) -> "CipherOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return _from_mapping(cls, value, {
                "salt": "salt_length",
                "saltLength": "salt_length",
                "iv": "iv_length",
                "ivLength": "iv_length",
            })
        raise ValidationError(f"Invalid cipher options: {value!r}")


@dataclass(frozen=True)
class ResolvedScryptHashOptions:
    """Scrypt hash options after defaults and clamping."""
    length: int
    salt_length: int
    params: ResolvedScryptParams


@dataclass(frozen=True)
class ScryptHashOptions:
    """Options for cryptkit.scrypt. Must match between hash and is_valid."""
    length: Optional[int] = None
    salt_length: Optional[int] = None
    options: ScryptParams = field(default_factory=ScryptParams)

    def resolve(self) -> ResolvedScryptHashOptions:
        return ResolvedScryptHashOptions(
            length=SCRYPT_HASH_LENGTH.resolve(self.length, "length"),
            salt_length=SCRYPT_SALT_LENGTH.resolve(self.salt_length, "salt_length"),
            params=ScryptParams.coerce(self.options).resolve(),
        )

    def with_params(self, params: ScryptParams) -> "ScryptHashOptions":
        return replace(self, options=params)

    @classmethod
    def coerce(cls, value: Union["ScryptHashOptions", Mapping[str, Any], None]) -> "ScryptHashOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            resolved = _from_mapping(cls, value, {"saltLength": "salt_length"})
            return resolved.with_params(ScryptParams.coerce(resolved.options))
        raise ValidationError(f"Invalid scrypt hash options: {value!r}")
