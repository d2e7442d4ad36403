from abc import ABC, abstractmethod
from ...mpc.types import MPZ, T


class IModularExponentiation(ABC):
    """Abstract base class defining the interface for modular exponentiation."""

    @staticmethod
    @abstractmethod
    def modexp(base: T, exponent: T, modulus: T) -> MPZ:
        """Compute (base ** exponent) % modulus without forming base ** exponent.

        Args:
            base (T): Non-negative base
            exponent (T): Non-negative exponent
            modulus (T): Positive modulus

        Returns:
            MPZ: The reduced power

        Raises:
            ValueError: If modulus is not positive, or base or exponent is negative
        """
