class GenerationExhaustedError(RuntimeError):
    """Raised when bounded prime generation tests its last candidate without success."""

    def __init__(self, bit_length: int, attempts: int) -> None:
        super().__init__(
            f"No probable prime of {bit_length} bits found in {attempts} attempts"
        )
        self.bit_length = bit_length
        self.attempts = attempts
