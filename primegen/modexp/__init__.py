"""Modular exponentiation module."""

from .ModularExponentiation import ModularExponentiation
from .abstract.IModularExponentiation import IModularExponentiation

__all__ = ["ModularExponentiation", "IModularExponentiation"]
