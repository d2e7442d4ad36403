"""Utility class for system specifications and resource management."""

import multiprocessing
from typing import Optional

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of worker processes for parallel prime generation.

        Returns the number of CPU cores divided by the PARALLELISM_DIVISOR
        environment variable (default 2), with a minimum of 1.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        if parallelism_divisor < 1:
            parallelism_divisor = 1
        return multiprocessing.cpu_count() // parallelism_divisor or 1

    @staticmethod
    def get_max_attempts() -> Optional[int]:
        """
        Read the configured cap on candidates tested per generated prime.

        Returns:
            Optional[int]: The cap, or None when generation is unbounded
        """
        max_attempts = EnvironmentManager.get_int(EnvironmentVariables.MAX_ATTEMPTS)
        return max_attempts if max_attempts > 0 else None
