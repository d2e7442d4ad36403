from gmpy2 import mpz

from primegen.mpc import MPC


def test_mpz_from_decimal_string():
    """Test that decimal strings convert without loss."""
    digits = "170141183460469231731687303715884105727"
    value = MPC.mpz(digits)
    assert isinstance(value, mpz)
    assert str(value) == digits
    assert value == 2**127 - 1

def test_parity():
    """Test the parity helpers on small and large values."""
    assert MPC.is_even(mpz(0))
    assert MPC.is_odd(mpz(7))
    assert not MPC.is_odd(mpz(2) ** 200)
    assert MPC.is_odd(mpz(2) ** 200 + 1)

def test_bit_length():
    """Test the position of the highest set bit."""
    assert MPC.bit_length(mpz(0)) == 0
    assert MPC.bit_length(mpz(1)) == 1
    assert MPC.bit_length(mpz(255)) == 8
    assert MPC.bit_length(mpz(256)) == 9
    assert MPC.bit_length(mpz(2) ** 127 - 1) == 127

def test_mpz_random_bounds():
    """Test that mpz_random stays within [0, upper)."""
    state = MPC.random_state(1234)
    values = {int(MPC.mpz_random(state, mpz(5))) for _ in range(500)}
    assert values == {0, 1, 2, 3, 4}
