"""
Shared definitions for bigcrypt.
"""

from .exceptions import (
    BigCryptError,
    ConfigurationError,
    MessageLoadError,
    ModulusTooSmallError,
)

__all__ = [
    'BigCryptError',
    'ConfigurationError',
    'MessageLoadError',
    'ModulusTooSmallError',
]
