"""Utility modules for prime generation."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables, EnvVarType

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables", "EnvVarType"]
