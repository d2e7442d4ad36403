"""Timing harness for modular exponentiation, primality testing and prime generation."""

import logging
import time

from primegen import MPC, generate_prime, is_probable_prime, modexp
from primegen.protocol_constants import BENCHMARK_BIT_SIZES
from primegen.utils import EnvironmentManager, EnvironmentVariables

ITERATIONS = 1000

BIG_BASE = MPC.mpz("12345678901234567890123456789000")
BIG_EXP = MPC.mpz("12345678901234567890123456789000")
BIG_MOD = MPC.mpz("98765432109876543210987654321000")
KNOWN_PRIME = MPC.mpz("170141183460469231731687303715884105727")


def time_call(func, *args) -> float:
    """Return the mean seconds per call over ITERATIONS calls."""
    start_time = time.perf_counter()
    for _ in range(ITERATIONS):
        func(*args)
    return (time.perf_counter() - start_time) / ITERATIONS


def main():
    """Run the benchmarks."""
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 80)
    print("PRIMEGEN BENCHMARKS")
    print("=" * 80)

    modexp_time = time_call(modexp, BIG_BASE, BIG_EXP, BIG_MOD)
    print(f"\nmodexp, 32 byte operands:     {modexp_time * 1e6:10.2f} us/call")

    miller_rabin_time = time_call(is_probable_prime, KNOWN_PRIME, 256)
    print(f"Miller-Rabin, 2^127 - 1:      {miller_rabin_time * 1e6:10.2f} us/call")

    print("\n" + "=" * 80)
    print("PRIME GENERATION")
    print("=" * 80)
    for bit_size in BENCHMARK_BIT_SIZES:
        start_time = time.perf_counter()
        prime = generate_prime(bit_size)
        gen_time = time.perf_counter() - start_time
        print(f"\n{bit_size:5d} bits in {gen_time:.4f} seconds")
        print(f"  p = {hex(prime)[:50]}...")

    return 0


if __name__ == "__main__":
    exit(main())
