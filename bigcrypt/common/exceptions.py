"""
Custom exceptions for bigcrypt.
"""


class BigCryptError(Exception):
    """Base exception for bigcrypt errors."""
    pass


class ConfigurationError(BigCryptError):
    """Parameter file missing, unparsable or invalid."""
    pass


class MessageLoadError(BigCryptError):
    """Message to be signed could not be read."""
    pass


class ModulusTooSmallError(BigCryptError):
    """Modulus cannot hold the padded digest block."""
    pass
