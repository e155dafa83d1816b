"""
RSA Signing Pipeline

Signs a message with a raw RSA private exponent:

    digest    = SHA-256(message)                (hex)
    padded    = PKCS#1 v1.5 block(digest, n)
    signature = padded^d mod n

Verification raises the signature back to the public exponent and compares
the result with the padded block.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from ..config.params import PathLike, SigningParams, iter_message_chunks
from ..core_crypto.modexp import mod_exp
from ..core_crypto.pkcs1 import pad_digest
from ..core_crypto.sha256 import SHA256, sha256_hex


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignatureResult:
    """Output of one signing run."""
    signature: int
    padded: int
    digest: str  # 64 hex chars

    def hex(self) -> str:
        """Signature as lowercase hex without leading zeros."""
        return format(self.signature, 'x')


@dataclass(frozen=True)
class VerificationResult:
    """signature^e mod n next to the block it should reproduce."""
    recovered: int
    expected: int

    @property
    def valid(self) -> bool:
        return self.recovered == self.expected


def sign_digest(digest_hex: str, params: SigningParams) -> SignatureResult:
    """
    Pad an existing SHA-256 digest and sign it.

    Args:
        digest_hex: 64-character hex digest
        params: RSA parameters (only n and d are used)

    Returns:
        SignatureResult with the signature, padded block and digest

    Raises:
        ModulusTooSmallError: If n cannot hold the padded block
    """
    padded = pad_digest(digest_hex, params.n)
    signature = mod_exp(padded, params.d, params.n)
    logger.info("Signed digest %s... with %d-bit key", digest_hex[:16], params.key_size)
    return SignatureResult(signature=signature, padded=padded, digest=digest_hex.lower())


def sign_message(message: bytes, params: SigningParams) -> SignatureResult:
    """Hash, pad and sign an in-memory message."""
    digest = sha256_hex(message)
    logger.debug("Message digest: %s", digest)
    return sign_digest(digest, params)


def sign_chunks(chunks: Iterable[bytes], params: SigningParams) -> SignatureResult:
    """Hash a stream of message chunks, then pad and sign."""
    hasher = SHA256()
    for chunk in chunks:
        hasher.update(chunk)
    digest = hasher.hexdigest()
    logger.debug("Message digest: %s", digest)
    return sign_digest(digest, params)


def sign_file(path: PathLike, params: SigningParams) -> SignatureResult:
    """
    Sign the contents of a file, reading it in chunks.

    Raises:
        MessageLoadError: If the file cannot be read
        ModulusTooSmallError: If n cannot hold the padded block
    """
    return sign_chunks(iter_message_chunks(path), params)


def recover_padded(signature: int, params: SigningParams) -> int:
    """Apply the public exponent: signature^e mod n."""
    return mod_exp(signature, params.e, params.n)


def verify_signature(signature: int, params: SigningParams, expected: int) -> VerificationResult:
    """
    Recompute signature^e mod n for comparison with the padded block.

    Args:
        signature: Signature integer
        params: RSA parameters (n and e are used)
        expected: The padded block the signature was made from

    Returns:
        VerificationResult; .valid is True when the blocks are equal
    """
    result = VerificationResult(recovered=recover_padded(signature, params), expected=expected)
    if not result.valid:
        logger.debug("Recovered block %x does not match %x", result.recovered, expected)
    return result

