# bigcrypt Test Suite
"""
Test suite including:
- Unit tests (core crypto, signing, key exchange, configuration)
- Command line tests
- Security tests (invalid inputs, tampering)

Run with: pytest
"""
