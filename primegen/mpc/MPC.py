from typing import Union

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: Union[int, str]) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def random_state(seed: int) -> RandomState:
        return gmpy2.random_state(seed)

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        return gmpy2.mpz_urandomb(state, bit_count)

    @staticmethod
    def mpz_random(state: RandomState, upper: MPZ) -> MPZ:
        return gmpy2.mpz_random(state, upper)

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def is_even(value: MPZ) -> bool:
        return gmpy2.is_even(value)

    @staticmethod
    def is_odd(value: MPZ) -> bool:
        return gmpy2.is_odd(value)

    @staticmethod
    def bit_length(value: MPZ) -> int:
        return gmpy2.bit_length(value)
