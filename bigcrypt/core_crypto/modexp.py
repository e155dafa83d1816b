"""
Modular Exponentiation

Big-integer arithmetic used by both the RSA signer and the
Diffie-Hellman exchange:
- Modular exponentiation (left-to-right square-and-multiply)
- Modulus byte length
- Decimal / hexadecimal integer parsing

Note: Python integers are arbitrary precision, so moduli and exponents of
      several hundred digits are represented exactly. The built-in
      pow(a, b, mod) is not used by the engine.
"""

from typing import Union


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using the square-and-multiply algorithm.

    Computes (base^exponent) mod modulus without ever forming the
    unreduced power.

    Algorithm (left-to-right binary method):
    1. Start with result = 1
    2. For each bit of exponent (from MSB to LSB):
       - Square the result (mod modulus)
       - If the bit is 1, multiply result by base (mod modulus)

    Time complexity: O(log exponent) modular multiplications

    Args:
        base: The base number
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)

    Returns:
        (base^exponent) mod modulus, in the range [0, modulus)

    Raises:
        ZeroDivisionError: If modulus == 0
        ValueError: If exponent < 0 or modulus < 0
    """
    if modulus == 0:
        raise ZeroDivisionError("Modulus must not be zero")
    if modulus < 0:
        raise ValueError("Modulus must be positive")
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus == 1:
        return 0

    base = base % modulus
    result = 1

    for bit in range(exponent.bit_length() - 1, -1, -1):
        result = (result * result) % modulus

        if (exponent >> bit) & 1:
            result = (result * base) % modulus

    return result


def byte_length(n: int) -> int:
    """Number of bytes needed to hold n (the RSA 'k' for a modulus)."""
    return (n.bit_length() + 7) // 8


def parse_int(value: Union[str, int]) -> int:
    """
    Parse a big integer from text.

    Accepts decimal strings ("3233"), hexadecimal strings with a
    0x prefix ("0xca1"), and plain ints. Surrounding whitespace and
    underscores between digits are tolerated, matching int().

    Args:
        value: Textual or integer value

    Returns:
        The parsed integer

    Raises:
        ValueError: If the text is not a valid decimal or 0x-hex integer
        TypeError: If value is neither str nor int (bool is rejected)
    """
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid integer value")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected str or int, got {type(value).__name__}")

    text = value.strip()
    if text.lower().startswith(('0x', '-0x')):
        return int(text, 16)
    return int(text, 10)
