"""Type definitions for multi-precision computing operations."""

from typing import TypeVar, NewType
from gmpy2 import mpz as _mpz, random_state as _random_state

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)
RandomState = NewType("RandomState", _random_state)

# Accepted wherever a big integer is expected
T = TypeVar("T", MPZ, int)
