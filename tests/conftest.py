"""
Shared fixtures: RSA keys generated by the cryptography package and a
hand-built key from two Mersenne primes.
"""

import json

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from bigcrypt.config.params import SigningParams


# Mersenne primes M521 and M607
MERSENNE_521 = (1 << 521) - 1
MERSENNE_607 = (1 << 607) - 1

# Textbook RSA: p = 61, q = 53
TOY_RSA = {'n': '3233', 'e': '17', 'd': '2753'}

# RFC 3526 - 2048-bit MODP Group (Group 14)
RFC3526_PRIME_2048 = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9"
    "DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
    "15728E5A8AACAA68FFFFFFFFFFFFFFFF", 16
)


@pytest.fixture(scope="session")
def rsa_private_key():
    """2048-bit key from cryptography."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_params(rsa_private_key):
    numbers = rsa_private_key.private_numbers()
    return SigningParams(
        n=numbers.public_numbers.n,
        e=numbers.public_numbers.e,
        d=numbers.d,
    )


@pytest.fixture(scope="session")
def mersenne_params():
    """1128-bit key built from M521 * M607 with e = 65537."""
    n = MERSENNE_521 * MERSENNE_607
    phi = (MERSENNE_521 - 1) * (MERSENNE_607 - 1)
    e = 65537
    d = pow(e, -1, phi)
    return SigningParams(n=n, e=e, d=d)


@pytest.fixture
def params_file(tmp_path, rsa_params):
    """Parameter file carrying both signing and key-exchange fields."""
    path = tmp_path / "params.json"
    path.write_text(json.dumps({
        'n': str(rsa_params.n),
        'e': rsa_params.e,
        'd': hex(rsa_params.d),
        'p': '23',
        'g': '5',
        'y_s': '19',
    }))
    return path


@pytest.fixture
def message_file(tmp_path):
    path = tmp_path / "message.txt"
    path.write_bytes(b"abc")
    return path
