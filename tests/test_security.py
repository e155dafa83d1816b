"""
Security tests for bigcrypt.

Tests specifically for security-related scenarios:
- Tampered messages and signatures
- Undersized moduli
- Invalid arithmetic inputs
"""

import pytest

from bigcrypt.common.exceptions import BigCryptError, ModulusTooSmallError
from bigcrypt.config.params import SigningParams, signing_params_from_mapping
from bigcrypt.core_crypto.modexp import mod_exp
from bigcrypt.core_crypto.pkcs1 import minimal_padded_block, pad_digest
from bigcrypt.core_crypto.sha256 import sha256_hex
from bigcrypt.signing.signer import (
    recover_padded, sign_message, verify_signature
)

from .conftest import TOY_RSA


ABC_DIGEST = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestTampering:
    """Modified messages or signatures must not verify."""

    def test_tampered_message_rejected(self, rsa_params):
        result = sign_message(b"pay alice 10", rsa_params)
        forged = sign_message(b"pay alice 1000", rsa_params)
        assert not verify_signature(result.signature, rsa_params, forged.padded).valid

    def test_tampered_signature_rejected(self, rsa_params):
        result = sign_message(b"pay alice 10", rsa_params)
        assert not verify_signature(result.signature ^ 1, rsa_params, result.padded).valid

    def test_signature_from_other_key_rejected(self, rsa_params, mersenne_params):
        result = sign_message(b"abc", mersenne_params)
        own = sign_message(b"abc", rsa_params)
        assert not verify_signature(result.signature, rsa_params, own.padded).valid

    def test_signature_does_not_expose_padded_block(self, rsa_params):
        result = sign_message(b"abc", rsa_params)
        assert result.signature != result.padded

    def test_wrong_public_exponent_fails(self, rsa_params):
        result = sign_message(b"abc", rsa_params)
        wrong = SigningParams(n=rsa_params.n, e=3, d=rsa_params.d)
        assert recover_padded(result.signature, wrong) != result.padded


class TestUndersizedModulus:
    """Padding must never be truncated to fit."""

    def test_textbook_rsa_rejected(self):
        params = signing_params_from_mapping(TOY_RSA)
        assert sha256_hex(b"abc") == ABC_DIGEST
        with pytest.raises(ModulusTooSmallError):
            sign_message(b"abc", params)

    def test_error_is_bigcrypt_error(self):
        with pytest.raises(BigCryptError):
            pad_digest(ABC_DIGEST, 3233)

    @pytest.mark.parametrize("bits", [64, 256, 424])
    def test_small_moduli_rejected(self, bits):
        with pytest.raises(ModulusTooSmallError):
            pad_digest(ABC_DIGEST, (1 << bits) - 1)

    def test_minimal_block_is_425_bits(self):
        """0x01 FF 00 + 19-byte header + 32-byte digest."""
        assert minimal_padded_block(ABC_DIGEST).bit_length() == 425

    def test_no_wraparound(self):
        """A block that does not fit is never reduced modulo n."""
        modulus = minimal_padded_block(ABC_DIGEST) - 1
        with pytest.raises(ModulusTooSmallError):
            pad_digest(ABC_DIGEST, modulus)


class TestArithmeticPreconditions:
    """Invalid inputs to the exponentiation engine."""

    def test_zero_modulus(self):
        with pytest.raises(ZeroDivisionError):
            mod_exp(12345, 65537, 0)

    def test_negative_exponent(self):
        with pytest.raises(ValueError):
            mod_exp(2, -3, 3233)
