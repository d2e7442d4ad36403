# protocol_constants.py

# Miller-Rabin round counts from the Handbook of Applied Cryptography (table 4.4),
# as used by OpenSSL. Each entry is (minimum bit length, rounds); entries are
# ordered from the largest threshold down and the first match wins.
# Error probability after t rounds is at most 4**-t.
ROUND_COUNT_TABLE = (
    (1300, 2),
    (850, 3),
    (650, 4),
    (550, 5),
    (450, 6),
    (400, 7),
    (350, 8),
    (300, 9),
    (250, 12),
    (200, 15),
    (150, 18),
)
DEFAULT_ROUND_COUNT = 27  # Anything below the smallest threshold

SMALLEST_WITNESS = 2
CANDIDATE_STEP = 2        # Advance between odd candidates

SEED_BIT_SIZE = 256       # Secure seed size for gmpy2 random states

BENCHMARK_BIT_SIZES = (64, 128, 256, 512, 1024)
