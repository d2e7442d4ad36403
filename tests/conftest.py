from typing import Iterable

import pytest
from gmpy2 import mpz

from primegen.random import IRandom


class FixedRandom(IRandom):
    """Replays preset witnesses and a preset starting candidate."""

    def __init__(self, witnesses: Iterable[int] = (), start: int = 0) -> None:
        self._witnesses = [mpz(w) for w in witnesses]
        self._start = mpz(start)
        self.range_calls = []

    def random_in_range(self, low, high):
        self.range_calls.append((low, high))
        # Repeat the last witness once the list runs out
        index = min(len(self.range_calls), len(self._witnesses)) - 1
        return self._witnesses[index]

    def random_with_bit_length(self, bit_length):
        return self._start


@pytest.fixture
def create_fixed_random():
    """Factory fixture to create FixedRandom sources with chosen witnesses and start value."""
    def _create(witnesses=(), start=0):
        return FixedRandom(witnesses, start)
    return _create
