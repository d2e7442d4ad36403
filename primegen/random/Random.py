import secrets
from typing import Optional

from ..mpc import MPC
from ..mpc.types import MPZ, RandomState, T
from ..protocol_constants import SEED_BIT_SIZE
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Implementation of secure random number generation.

    Each instance owns its own random state, so instances must not be shared
    between threads or processes.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """Initialize the random state.

        Args:
            seed (int, optional): Fixed seed for reproducible draws. When
                omitted a secure seed of SEED_BIT_SIZE bits is used.
        """
        if seed is None:
            seed = secrets.randbits(SEED_BIT_SIZE)
        self._state: RandomState = MPC.random_state(seed)

    def random_in_range(self, low: T, high: T) -> MPZ:
        low = MPC.mpz(low)
        high = MPC.mpz(high)
        if high <= low:
            raise ValueError(f"Empty range: [{low}, {high})")
        return low + MPC.mpz_random(self._state, high - low)

    def random_with_bit_length(self, bit_length: int) -> MPZ:
        if bit_length < 1:
            raise ValueError(f"bit_length must be positive, got {bit_length}")
        top_bit = MPC.mpz(1) << (bit_length - 1)
        if bit_length == 1:
            return top_bit
        return top_bit + MPC.mpz_urandomb(self._state, bit_length - 1)
