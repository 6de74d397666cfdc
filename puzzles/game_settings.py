"""
Game configuration constants.

Every tuning knob of the five puzzle modes lives here. Generators and
sessions take keyword overrides that default to these values, so tests and
callers can shrink budgets without touching this module.
"""

from typing import Final

# Shared
WORD_LENGTH: Final[int] = 5
WILDCARD: Final[str] = "_"

# Wordle
WORDLE_MAX_GUESSES: Final[int] = 6

# Quordle
QUORDLE_BOARDS: Final[int] = 4
QUORDLE_MAX_GUESSES: Final[int] = 9

# Streakle
STREAKLE_TARGETS: Final[int] = 3
STREAKLE_MAX_GUESSES: Final[int] = 8

# Pattern Hunt
PATTERN_MIN_MATCHES: Final[int] = 3
PATTERN_MAX_MATCHES: Final[int] = 15
PATTERN_MAX_ATTEMPTS: Final[int] = 5000
PATTERN_MIN_FALLBACK_MATCHES: Final[int] = 2

# Spelling Bee
HIVE_SIZE: Final[int] = 7
BEE_MIN_WORD_LENGTH: Final[int] = 4
BEE_MAX_WORDS: Final[int] = 100
HIVE_MIN_WORDS: Final[int] = 12
HIVE_MAX_ATTEMPTS: Final[int] = 600
PANGRAM_BONUS: Final[int] = 7
