"""
SHA-256 Digest Encoder (From Scratch)

Implements the SHA-256 hash function as defined in FIPS 180-4, written as an
incremental hasher so large message files can be fed in chunks.

Components:
- Message schedule: expands 16 words to 64 words
- Compression: 64 rounds per 512-bit block
- Finalisation: 0x80 marker, zero fill, 64-bit bit-length trailer
- Output: 256-bit digest, or 64 lowercase hex characters

Output is bit-for-bit identical to hashlib.sha256.
"""

import struct
from typing import List


# First 32 bits of the fractional parts of the square roots of the first 8 primes
H_INITIAL = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# First 32 bits of the fractional parts of the cube roots of the first 64 primes
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)

MASK_32 = 0xFFFFFFFF
BLOCK_SIZE = 64
DIGEST_SIZE = 32
HEX_DIGEST_LENGTH = 2 * DIGEST_SIZE


def _rotr(value: int, amount: int) -> int:
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def _expand(block: bytes) -> List[int]:
    """
    Build the 64-word message schedule for one 64-byte block.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    w = list(struct.unpack('>16L', block))
    for i in range(16, 64):
        x = w[i - 15]
        y = w[i - 2]
        s0 = _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)
        s1 = _rotr(y, 17) ^ _rotr(y, 19) ^ (y >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)
    return w


def _compress(state: List[int], block: bytes) -> List[int]:
    """Run the 64 compression rounds over one block and fold into state."""
    w = _expand(block)
    a, b, c, d, e, f, g, h = state

    for i in range(64):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g & MASK_32)
        t1 = (h + big_s1 + ch + K[i] + w[i]) & MASK_32

        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & MASK_32

        h, g, f, e = g, f, e, (d + t1) & MASK_32
        d, c, b, a = c, b, a, (t1 + t2) & MASK_32

    return [(s + v) & MASK_32 for s, v in zip(state, (a, b, c, d, e, f, g, h))]


def _final_padding(message_length: int) -> bytes:
    """0x80, zero fill to 56 mod 64, then the bit length as a 64-bit big-endian int."""
    zeros = (55 - message_length) % BLOCK_SIZE
    return b'\x80' + b'\x00' * zeros + struct.pack('>Q', (message_length * 8) & 0xFFFFFFFFFFFFFFFF)


class SHA256:
    """
    Incremental SHA-256 hasher with a hashlib-like interface.

    Example:
        >>> h = SHA256()
        >>> h.update(b"a")
        >>> h.update(b"bc")
        >>> h.hexdigest()
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """

    name = 'sha256'
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b''):
        self._state = list(H_INITIAL)
        self._buffer = b''
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Absorb more input. May be called any number of times."""
        data = bytes(data)
        self._length += len(data)
        buffer = self._buffer + data

        whole = len(buffer) - (len(buffer) % BLOCK_SIZE)
        for offset in range(0, whole, BLOCK_SIZE):
            self._state = _compress(self._state, buffer[offset:offset + BLOCK_SIZE])

        self._buffer = buffer[whole:]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything absorbed so far."""
        tail = self._buffer + _final_padding(self._length)
        state = list(self._state)
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + BLOCK_SIZE])
        return struct.pack('>8L', *state)

    def hexdigest(self) -> str:
        """Return the digest as 64 lowercase hex characters."""
        return self.digest().hex()

    def copy(self) -> 'SHA256':
        """Return an independent hasher with the same absorbed input."""
        clone = SHA256()
        clone._state = list(self._state)
        clone._buffer = self._buffer
        clone._length = self._length
        return clone


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return SHA256(data).digest()


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character lowercase hexadecimal string

    Example:
        >>> sha256_hex(b"abc")
        'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    """
    return SHA256(data).hexdigest()
