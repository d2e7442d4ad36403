from typing import Optional, Tuple

from ..modexp import ModularExponentiation
from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..protocol_constants import SMALLEST_WITNESS
from ..random import IRandom, Random
from .RoundCountTable import RoundCountTable
from .abstract.IPrimalityTest import IPrimalityTest


class MillerRabin(IPrimalityTest):
    """Miller-Rabin probabilistic primality test.

    The guarantee only holds for odd candidates of at least 3. Other inputs
    are resolved without running the witness loop: below 2 is not prime,
    2 and 3 are prime, any other even value is composite.
    """

    def __init__(self, random: Optional[IRandom] = None) -> None:
        """Initialize the tester.

        Args:
            random (IRandom, optional): Source of witnesses. A fresh securely
                seeded Random is used when omitted.
        """
        self._random = random if random is not None else Random()

    def is_probable_prime(self, candidate: T, bit_length: int) -> bool:
        if bit_length < 1:
            raise ValueError(f"bit_length must be positive, got {bit_length}")
        candidate = MPC.mpz(candidate)
        if candidate < 2:
            return False
        if candidate < 4:
            return True
        if MPC.is_even(candidate):
            return False

        s, d = MillerRabin.decompose(candidate)
        rounds = RoundCountTable.get_round_count(bit_length)
        for _ in range(rounds):
            witness = self._random.random_in_range(SMALLEST_WITNESS, candidate - 1)
            if MillerRabin._proves_composite(witness, candidate, s, d):
                return False
        return True

    @staticmethod
    def decompose(candidate: T) -> Tuple[int, MPZ]:
        """Write candidate - 1 as d * 2**s with d odd.

        Args:
            candidate (T): Value of at least 2

        Returns:
            Tuple[int, MPZ]: The pair (s, d)
        """
        candidate = MPC.mpz(candidate)
        if candidate < 2:
            raise ValueError(f"candidate - 1 must be positive, got candidate {candidate}")
        s = 0
        d = candidate - 1
        while MPC.is_even(d):
            d >>= 1
            s += 1
        return s, d

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _proves_composite(witness: MPZ, candidate: MPZ, s: int, d: MPZ) -> bool:
        """Run a single round for one witness.

        Returns:
            bool: True if the witness shows the candidate is composite
        """
        minus_one = candidate - 1
        x = ModularExponentiation.modexp(witness, d, candidate)
        if x == 1 or x == minus_one:
            return False
        # x**(2**s) is never inspected, so only s - 1 squarings are needed
        for _ in range(s - 1):
            x = MPC.mod(x * x, candidate)
            if x == 1:
                return True
            if x == minus_one:
                return False
        return True
