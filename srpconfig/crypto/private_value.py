# srpconfig/crypto/private_value.py
import secrets
from typing import Callable

PrivateValueFunc = Callable[[], int]


def generate_private_value(N: int, randbelow: Callable[[int], int] = secrets.randbelow) -> int:
    """
    Random value in [2^(min_bits-1), N) where min_bits = bit_length(N) // 2,
    i.e. less than N but at least half as wide.

    `randbelow` must be a uniform CSPRNG sampler; it is only swapped out in tests.
    """
    if N < 1:
        raise ValueError("N must be positive to bound a private value")

    # e.g. N 8 bits wide -> min_bits 4 -> floor 2^3 = 8
    min_bits = N.bit_length() // 2
    floor = 2 ** (min_bits - 1) if min_bits > 0 else 0
    return floor + randbelow(N - floor)


def fixed_value(value: int) -> PrivateValueFunc:
    """
    Override that always returns `value`.

    ONLY for test vectors: a fixed exponent is predictable and must never
    end up in a deployed configuration.
    """
    def private_value() -> int:
        return value
    return private_value
