"""Probabilistic primality testing module."""

from .MillerRabin import MillerRabin
from .RoundCountTable import RoundCountTable
from .abstract.IPrimalityTest import IPrimalityTest

__all__ = ["MillerRabin", "RoundCountTable", "IPrimalityTest"]
