from abc import ABC, abstractmethod
from typing import Union
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: Union[int, str]) -> MPZ:
        """Convert a Python integer or decimal string to an mpz.

        Args:
            value (int | str): Integer value, or its base 10 representation

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a random state from a seed.

        Args:
            seed (int): Seed value for random state

        Returns:
            RandomState: Random state object
        """

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Generate a uniformly distributed integer in [0, 2**bit_count).

        Args:
            state (RandomState): Random state to use
            bit_count (int): Number of bits in result

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def mpz_random(state: RandomState, upper: MPZ) -> MPZ:
        """Generate a uniformly distributed integer in [0, upper).

        Args:
            state (RandomState): Random state to use
            upper (mpz): Exclusive upper bound, must be positive

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def is_even(value: MPZ) -> bool:
        """Return True if value is divisible by two."""

    @staticmethod
    @abstractmethod
    def is_odd(value: MPZ) -> bool:
        """Return True if value is not divisible by two."""

    @staticmethod
    @abstractmethod
    def bit_length(value: MPZ) -> int:
        """Position of the highest set bit (0 for zero).

        Args:
            value (mpz): Non-negative value

        Returns:
            int: Number of significant bits
        """
