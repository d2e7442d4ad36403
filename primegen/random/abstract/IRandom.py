from abc import ABC, abstractmethod
from ...mpc.types import MPZ, T


class IRandom(ABC):
    """Abstract base class defining the interface for uniform random big integers.

    Implementations must draw without bias; reducing a fixed-width word modulo
    the range size is not acceptable.
    """

    @abstractmethod
    def random_in_range(self, low: T, high: T) -> MPZ:
        """Get a random integer uniformly distributed over [low, high).

        Args:
            low (T): Inclusive lower bound
            high (T): Exclusive upper bound, must be greater than low

        Returns:
            MPZ: A random integer in the half-open range
        """

    @abstractmethod
    def random_with_bit_length(self, bit_length: int) -> MPZ:
        """Get a random integer with exactly bit_length significant bits.

        The top bit is always set, the remaining bits are uniform.

        Args:
            bit_length (int): Number of bits, at least 1

        Returns:
            MPZ: A random integer in [2**(bit_length - 1), 2**bit_length)
        """
