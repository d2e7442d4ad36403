"""Generation and Miller-Rabin testing of cryptographically sized probable primes."""

from typing import List, Optional

from .modexp import ModularExponentiation
from .mpc import MPC, MPZ, T
from .primality import MillerRabin, RoundCountTable
from .primes import GenerationExhaustedError, Primes
from .random import IRandom, Random

__all__ = [
    "modexp",
    "is_probable_prime",
    "generate_prime",
    "generate_primes",
    "GenerationExhaustedError",
    "MillerRabin",
    "ModularExponentiation",
    "MPC",
    "MPZ",
    "Primes",
    "Random",
    "IRandom",
    "RoundCountTable",
]


def modexp(base: T, exponent: T, modulus: T) -> MPZ:
    """Compute (base ** exponent) % modulus by square-and-multiply."""
    return ModularExponentiation.modexp(base, exponent, modulus)


def is_probable_prime(candidate: T, bit_length: int, random: Optional[IRandom] = None) -> bool:
    """Run Miller-Rabin on candidate with the round count for bit_length."""
    return MillerRabin(random).is_probable_prime(candidate, bit_length)


def generate_prime(
    bit_length: int,
    max_attempts: Optional[int] = None,
    random: Optional[IRandom] = None,
) -> MPZ:
    """Generate a random probable prime of bit_length bits."""
    return Primes(random).generate_prime(bit_length, max_attempts)


def generate_primes(bit_length: int, amount: int) -> List[MPZ]:
    """Generate amount probable primes in parallel worker processes."""
    return Primes().generate_primes(bit_length, amount)
