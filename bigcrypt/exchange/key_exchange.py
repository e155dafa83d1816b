"""
Diffie-Hellman Key Exchange

Computes the client side of a classical DH exchange against a server whose
public value is already known:

    client_public = g^x mod p
    shared_secret = y_s^x mod p

Both sides arrive at g^(x * x_s) mod p provided the server used the same
(p, g). That cannot be checked from one side and is not enforced here.
"""

import logging
from dataclasses import dataclass

from ..config.params import ExchangeParams
from ..core_crypto.modexp import mod_exp


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeResult:
    """Client public value and the shared secret."""
    local_public: int
    shared_secret: int


def public_value(p: int, g: int, private_scalar: int) -> int:
    """
    Compute a DH public value.

    Args:
        p: Prime modulus
        g: Generator
        private_scalar: Private exponent

    Returns:
        g^private_scalar mod p
    """
    return mod_exp(g, private_scalar, p)


def compute_shared_secret(private_scalar: int, peer_public: int, p: int) -> int:
    """
    Compute the shared secret from the peer's public value.

    Returns:
        peer_public^private_scalar mod p
    """
    return mod_exp(peer_public, private_scalar, p)


def exchange(params: ExchangeParams) -> ExchangeResult:
    """
    Run the client side of the exchange.

    Args:
        params: Domain parameters, server public value and private scalar

    Returns:
        ExchangeResult(local_public, shared_secret)
    """
    local_public = public_value(params.p, params.g, params.private_scalar)
    shared_secret = compute_shared_secret(params.private_scalar, params.y_s, params.p)
    logger.info("Computed DH shared secret over %d-bit prime", params.p.bit_length())
    return ExchangeResult(local_public=local_public, shared_secret=shared_secret)
