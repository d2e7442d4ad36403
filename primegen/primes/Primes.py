import logging
import multiprocessing
from typing import List, Optional

from ..mpc import MPC
from ..mpc.types import MPZ
from ..primality import IPrimalityTest, MillerRabin
from ..protocol_constants import CANDIDATE_STEP
from ..random import IRandom, Random
from ..utils.SystemSpecs import SystemSpecs
from .abstract.IPrimes import IPrimes
from .exceptions import GenerationExhaustedError

logger = logging.getLogger(__name__)


class Primes(IPrimes):
    """Implementation of prime number generation.

    A random odd candidate of the requested size is drawn, then walked upward
    two at a time until the primality test accepts it. The walk has no
    iteration limit unless max_attempts (or PRIMEGEN_MAX_ATTEMPTS) sets one.
    """

    def __init__(
        self,
        random: Optional[IRandom] = None,
        tester: Optional[IPrimalityTest] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            random (IRandom, optional): Source of candidates. A fresh securely
                seeded Random is used when omitted.
            tester (IPrimalityTest, optional): Test applied to candidates.
                Defaults to Miller-Rabin sharing the same random source.
        """
        self._random = random if random is not None else Random()
        self._tester = tester if tester is not None else MillerRabin(self._random)

    def generate_prime(self, bit_length: int, max_attempts: Optional[int] = None) -> MPZ:
        if bit_length < 1:
            raise ValueError(f"bit_length must be positive, got {bit_length}")
        if max_attempts is None:
            max_attempts = SystemSpecs.get_max_attempts()
        elif max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        candidate = self._random.random_with_bit_length(bit_length)
        if MPC.is_even(candidate):
            candidate += 1
        logger.debug("Drew %d-bit starting candidate", MPC.bit_length(candidate))

        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            if self._tester.is_probable_prime(candidate, bit_length):
                logger.debug(
                    "Accepted %d-bit probable prime after %d attempts",
                    bit_length, attempts,
                )
                return candidate
            candidate += CANDIDATE_STEP

        logger.warning(
            "Gave up on a %d-bit prime after %d attempts", bit_length, attempts
        )
        raise GenerationExhaustedError(bit_length, attempts)

    def generate_primes(self, bit_length: int, amount: int) -> List[MPZ]:
        if bit_length < 1:
            raise ValueError(f"bit_length must be positive, got {bit_length}")
        if amount < 0:
            raise ValueError(f"amount must not be negative, got {amount}")
        if amount == 0:
            return []
        prime_params = [bit_length for _ in range(amount)]

        num_workers = SystemSpecs.get_num_parallel_processes()

        # Workers build their own random source; nothing is shared between processes
        with multiprocessing.Pool(num_workers) as pool:
            primes = pool.map(Primes._generate_prime_parallel, prime_params)

        return primes

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _generate_prime_parallel(bit_length: int) -> MPZ:
        """Helper method to generate a single prime for multiprocessing.

        Args:
            bit_length (int): Number of bits for the prime number

        Returns:
            MPZ: A random probable prime
        """
        return Primes().generate_prime(bit_length)
