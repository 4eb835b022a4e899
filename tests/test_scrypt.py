"""
Tests for salted scrypt password hashing.
"""

import pytest

from cryptkit import scrypt
from cryptkit.config import ScryptHashOptions, ScryptParams
from cryptkit.crypto.engine import KeyDerivationError


PASSWORD = "verystrongpassword"

# Cheap parameters keep the suite fast
FAST = ScryptParams(cost=1024, block_size=8, parallelization=1)
OPTIONS = {
    "cost": 8192 * 2,
    "parallelization": 4,
    "blockSize": 1,
    "maxmem": 32 * 1024 * 1024,
}


class TestHash:
    """Test scrypt.hash."""

    def test_hashes_a_string(self):
        """Test the default package size."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert isinstance(stored, bytes)
        assert len(stored) == 32 + 64

    def test_default_parameters(self):
        """Test hashing with the default scrypt parameters."""
        assert len(scrypt.hash(PASSWORD)) == 96

    def test_always_returns_a_unique_hash(self):
        """Test that a fresh salt is drawn for each call."""
        assert scrypt.hash(PASSWORD, {"options": FAST}) != scrypt.hash(PASSWORD, {"options": FAST})

    def test_hash_length_customization(self):
        """Test a custom derived key length."""
        assert len(scrypt.hash(PASSWORD, {"length": 16, "options": FAST})) == 48

    def test_salt_length_customization(self):
        """Test a custom salt length."""
        assert len(scrypt.hash(PASSWORD, {"length": 16, "saltLength": 16, "options": FAST})) == 32

    def test_algorithm_customization(self):
        """Test custom scrypt parameters given as a mapping."""
        stored = scrypt.hash(PASSWORD, {"length": 16, "salt_length": 16, "options": OPTIONS})

        assert len(stored) == 32

    def test_lengths_are_clamped(self):
        """Test that lengths are clamped into range."""
        stored = scrypt.hash(PASSWORD, ScryptHashOptions(length=1000, salt_length=1, options=FAST))

        assert len(stored) == 16 + 256

    def test_invalid_parameters_raise(self):
        """Test that hash reports invalid scrypt parameters."""
        with pytest.raises(KeyDerivationError):
            scrypt.hash(PASSWORD, {"options": {"cost": 1000}})

    def test_maxmem_exceeded_raises(self):
        """Test that hash enforces the memory limit."""
        with pytest.raises(KeyDerivationError):
            scrypt.hash(PASSWORD, {"options": {"maxmem": 1024}})


class TestIsValid:
    """Test scrypt.is_valid."""

    def test_validates_a_hash(self):
        """Test matching and non matching keys."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert scrypt.is_valid(PASSWORD, stored, {"options": FAST}) is True
        assert scrypt.is_valid("wrong password", stored, {"options": FAST}) is False

    def test_validates_with_custom_options(self):
        """Test validation with custom scrypt parameters."""
        options = {"options": OPTIONS}
        stored = scrypt.hash(PASSWORD, options)

        assert scrypt.is_valid(PASSWORD, stored, options) is True
        assert scrypt.is_valid("wrong password", stored, options) is False

    def test_validates_with_custom_lengths(self):
        """Test validation with custom lengths."""
        options = ScryptHashOptions(length=16, salt_length=16, options=FAST)
        stored = scrypt.hash(PASSWORD, options)

        assert scrypt.is_valid(PASSWORD, stored, options) is True

    def test_binary_key(self):
        """Test that text and its UTF-8 bytes are the same key."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert scrypt.is_valid(PASSWORD.encode(), stored, {"options": FAST}) is True

    def test_alias_parameters_take_precedence(self):
        """Test that N, r and p win over cost, block_size and parallelization."""
        aliased = ScryptParams(cost=1000, block_size=0, parallelization=0, N=1024, r=8, p=1)
        stored = scrypt.hash(PASSWORD, {"options": aliased})

        assert scrypt.is_valid(PASSWORD, stored, {"options": FAST}) is True

    def test_mismatched_parameters(self):
        """Test that different scrypt parameters fail validation."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert scrypt.is_valid(PASSWORD, stored, {"options": ScryptParams(cost=2048)}) is False

    def test_mismatched_length(self):
        """Test that a different hash length fails validation."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert scrypt.is_valid(PASSWORD, stored, {"length": 32, "options": FAST}) is False

    @pytest.mark.parametrize("stored", [None, b"", bytearray(), "", 12345, object()])
    def test_malformed_hash_returns_false(self, stored):
        """Test that missing and non binary hashes return False."""
        assert scrypt.is_valid(PASSWORD, stored) is False

    def test_too_short_hash_returns_false(self):
        """Test that a truncated hash returns False."""
        assert scrypt.is_valid(PASSWORD, b"\x00" * 40, {"length": 2}) is False

    def test_invalid_key_returns_false(self):
        """Test that a non binary key returns False."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert scrypt.is_valid(None, stored, {"options": FAST}) is False

    def test_invalid_options_return_false(self):
        """Test that malformed options return False."""
        stored = scrypt.hash(PASSWORD, {"options": FAST})

        assert scrypt.is_valid(PASSWORD, stored, {"bogus": 1}) is False

    def test_derivation_failure_returns_false(self):
        """Test that a derivation error is reported as False."""
        stored = scrypt.hash(PASSWORD)

        assert scrypt.is_valid(PASSWORD, stored, {"options": {"maxmem": 1024}}) is False
        assert scrypt.is_valid(PASSWORD, stored, {"options": {"cost": 1000}}) is False


class TestPresets:
    """Test hashing with the named scrypt parameter bundles."""

    @pytest.mark.parametrize("name", ["standard", "high", "limited"])
    def test_preset_roundtrip(self, name):
        """Test that each preset can hash and validate a key."""
        options = ScryptHashOptions(length=16, salt_length=16, options=ScryptParams.preset(name))
        stored = scrypt.hash(PASSWORD, options)

        assert len(stored) == 32
        assert scrypt.is_valid(PASSWORD, stored, options) is True
