from ..mpc import MPC
from ..mpc.types import MPZ, T
from .abstract.IModularExponentiation import IModularExponentiation


class ModularExponentiation(IModularExponentiation):
    """Right-to-left binary (square-and-multiply) exponentiation."""

    @staticmethod
    def modexp(base: T, exponent: T, modulus: T) -> MPZ:
        base = MPC.mpz(base)
        exponent = MPC.mpz(exponent)
        modulus = MPC.mpz(modulus)
        if modulus <= 0:
            raise ValueError(f"modulus must be positive, got {modulus}")
        if base < 0 or exponent < 0:
            raise ValueError("base and exponent must be non-negative")

        # Reduced so that a modulus of 1 gives 0
        result = MPC.mod(MPC.mpz(1), modulus)
        base = MPC.mod(base, modulus)

        while exponent > 0:
            if MPC.is_odd(exponent):
                result = MPC.mod(result * base, modulus)
            base = MPC.mod(base * base, modulus)
            exponent >>= 1

        return result
