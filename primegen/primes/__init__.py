"""Prime number generation module."""

from .Primes import Primes
from .exceptions import GenerationExhaustedError
from .abstract.IPrimes import IPrimes

__all__ = ["Primes", "IPrimes", "GenerationExhaustedError"]
