# Key Exchange Module
"""
Classical Diffie-Hellman key exchange over a supplied prime group.
"""

from .key_exchange import (
    ExchangeResult,
    public_value,
    compute_shared_secret,
    exchange,
)

__all__ = [
    'ExchangeResult',
    'public_value',
    'compute_shared_secret',
    'exchange',
]
