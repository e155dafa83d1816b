# Core Cryptography Module
"""
Core big-integer cryptography:
- Modular exponentiation (square-and-multiply)
- SHA-256 digest encoder
- PKCS#1 v1.5 padding builder
"""
