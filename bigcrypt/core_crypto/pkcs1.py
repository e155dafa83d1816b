"""
PKCS#1 v1.5 Padding Builder

Builds the EMSA-PKCS1-v1_5 style block that gets raised to the private
exponent:

    0001 || FF ... FF || 00 || DigestInfo(SHA-256) header || digest

The FF run is grown one byte at a time and the longest block that is still
strictly below the modulus is returned. The block is read as an integer, so
its leading 00 byte takes no room: for a k-byte modulus with a top byte of
0x02 or more the run is one byte longer than the fixed-length k-byte
encoding of RFC 8017.
"""

import logging
import re

from ..common.exceptions import ModulusTooSmallError
from .modexp import byte_length
from .sha256 import HEX_DIGEST_LENGTH


logger = logging.getLogger(__name__)

# DER-encoded DigestInfo prefix identifying SHA-256 (RFC 8017, section 9.2)
ASN1_SHA256_HEADER = '3031300d060960864801650304020105000420'

BLOCK_MARKER = '0001'
PAD_BYTE = 'ff'
SEPARATOR = '00'

_HEX_DIGEST = re.compile(r'[0-9a-f]{%d}' % HEX_DIGEST_LENGTH)


def _check_digest(digest_hex: str) -> str:
    digest_hex = digest_hex.lower()
    if not _HEX_DIGEST.fullmatch(digest_hex):
        raise ValueError(
            f"Digest must be {HEX_DIGEST_LENGTH} hex characters, got {digest_hex!r}"
        )
    return digest_hex


def build_candidate(digest_hex: str, ff_count: int) -> int:
    """
    Build the padded block with exactly ff_count FF bytes.

    Args:
        digest_hex: 64-character SHA-256 digest
        ff_count: Length of the FF run in bytes (at least 1)

    Returns:
        The block interpreted as a big-endian integer
    """
    if ff_count < 1:
        raise ValueError("At least one FF padding byte is required")
    digest_hex = _check_digest(digest_hex)
    block = BLOCK_MARKER + PAD_BYTE * ff_count + SEPARATOR + ASN1_SHA256_HEADER + digest_hex
    return int(block, 16)


def minimal_padded_block(digest_hex: str) -> int:
    """The shortest valid block: a single FF byte."""
    return build_candidate(digest_hex, 1)


def pad_digest(digest_hex: str, modulus: int) -> int:
    """
    Pad a SHA-256 digest to the largest block below the modulus.

    Starts with a single FF byte and keeps extending the run while the
    block stays below the modulus. The minimal block is checked before
    the loop, so there is always a valid predecessor to return.

    Args:
        digest_hex: 64-character hexadecimal SHA-256 digest
        modulus: RSA modulus n

    Returns:
        Padded block P with P < modulus, such that one more FF byte
        would give a value >= modulus

    Raises:
        ModulusTooSmallError: If even the single-FF block is >= modulus
        ValueError: If digest_hex is not 64 hex characters
    """
    ff_count = 1
    padded = build_candidate(digest_hex, ff_count)

    if padded >= modulus:
        raise ModulusTooSmallError(
            f"Modulus ({modulus.bit_length()} bits) is too small for a "
            f"{padded.bit_length()}-bit PKCS#1 SHA-256 block"
        )

    while True:
        candidate = build_candidate(digest_hex, ff_count + 1)
        if candidate >= modulus:
            break
        ff_count += 1
        padded = candidate

    logger.debug("Padded digest with %d FF bytes for a %d-byte modulus", ff_count, byte_length(modulus))
    return padded
