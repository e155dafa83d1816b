"""
bigcrypt

Asymmetric cryptography on plain big-integer arithmetic:
- RSA signing with hand-built PKCS#1 v1.5 padding over SHA-256
- Diffie-Hellman shared-secret computation
"""

__version__ = "1.0.0"
