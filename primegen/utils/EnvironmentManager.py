"""Settings for prime generation read from environment variables."""

import logging
import os
from enum import Enum
from typing import Any, cast

logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Settings the package reads from the environment.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    PARALLELISM_DIVISOR = ("PARALLELISM_DIVISOR", 2, EnvVarType.INT)
    MAX_ATTEMPTS = ("PRIMEGEN_MAX_ATTEMPTS", 0, EnvVarType.INT)  # 0 is unbounded
    LOG_LEVEL = ("PRIMEGEN_LOG_LEVEL", "WARNING", EnvVarType.STRING)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static accessors for the settings in EnvironmentVariables."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Read a setting, converted to its declared type.

        An integer setting that does not parse is logged and replaced by the default.

        Args:
            env_var: The setting to read
            override_default: Used instead of the enum default when given

        Returns:
            The environment value, or the default when unset
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None:
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Ignoring %s=%r, not an integer; using %r",
                    env_var.env_name, value, default,
                )
                return default
        return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default = None) -> int:
        """Read an integer setting such as PRIMEGEN_MAX_ATTEMPTS."""
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default = None) -> str:
        """Read a string setting such as PRIMEGEN_LOG_LEVEL."""
        return cast(str, EnvironmentManager.get_value(env_var, default))
