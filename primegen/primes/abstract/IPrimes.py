from abc import ABC, abstractmethod
from typing import List, Optional
from ...mpc.types import MPZ


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @abstractmethod
    def generate_prime(self, bit_length: int, max_attempts: Optional[int] = None) -> MPZ:
        """Get a random probable prime.

        Args:
            bit_length (int): Number of bits for the prime number.
            max_attempts (int, optional): Cap on the number of candidates
                tested. Unbounded when None.

        Returns:
            MPZ: A random probable prime

        Raises:
            GenerationExhaustedError: If max_attempts candidates were rejected
        """

    @abstractmethod
    def generate_primes(self, bit_length: int, amount: int) -> List[MPZ]:
        """Get several independent random probable primes.

        Args:
            bit_length (int): Number of bits for each prime number.
            amount (int): How many primes to generate.

        Returns:
            List[MPZ]: The probable primes
        """
