from abc import ABC, abstractmethod
from ...mpc.types import T


class IPrimalityTest(ABC):
    """Abstract base class defining the interface for probabilistic primality tests."""

    @abstractmethod
    def is_probable_prime(self, candidate: T, bit_length: int) -> bool:
        """Test a candidate for primality.

        False means the candidate is certainly composite. True means it is
        probably prime, with the error bound of the test for bit_length.

        Args:
            candidate (T): Value to test, odd and at least 3
            bit_length (int): Bit length the candidate was drawn for

        Returns:
            bool: Whether the candidate is a probable prime
        """
