# RSA Signing Module
"""
RSA signing over SHA-256 with hand-built PKCS#1 v1.5 padding:
- Sign in-memory messages, chunk streams or files
- Self-verification (signature^e mod n)
"""

from .signer import (
    SignatureResult,
    VerificationResult,
    sign_digest,
    sign_message,
    sign_chunks,
    sign_file,
    recover_padded,
    verify_signature,
)

__all__ = [
    'SignatureResult',
    'VerificationResult',
    'sign_digest',
    'sign_message',
    'sign_chunks',
    'sign_file',
    'recover_padded',
    'verify_signature',
]
