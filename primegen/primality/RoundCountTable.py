from typing import Sequence, Tuple

from ..protocol_constants import DEFAULT_ROUND_COUNT, ROUND_COUNT_TABLE


class RoundCountTable:
    """Maps a candidate bit length to the number of Miller-Rabin rounds."""

    @staticmethod
    def get_round_count(
        bit_length: int,
        table: Sequence[Tuple[int, int]] = ROUND_COUNT_TABLE,
        default: int = DEFAULT_ROUND_COUNT,
    ) -> int:
        """Select the round count for a bit length.

        Args:
            bit_length (int): Bit length of the candidate
            table: (threshold, rounds) pairs, largest threshold first
            default (int): Rounds when no threshold is met

        Returns:
            int: Number of witness rounds
        """
        for threshold, rounds in table:
            if bit_length >= threshold:
                return rounds
        return default
